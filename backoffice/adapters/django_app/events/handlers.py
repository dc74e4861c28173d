"""
Event Handlers - Processadores de Eventos de Domínio.

Executados de forma assíncrona via Celery quando o
CeleryEventPublisher publica um evento após o commit.

Fluxo:
    CeleryEventPublisher -> dispatch_domain_event -> handler do evento

Handlers:
- record_client_history: grava ClientHistoryModel para eventos de cliente
- log_domain_event: registra eventos sem handler específico
"""

import logging
from typing import Any, Dict

from celery import shared_task
from django.db import transaction

logger = logging.getLogger(__name__)


CLIENT_EVENTS = (
    'ClienteCriadoEvent',
    'ClienteAtualizadoEvent',
    'ClienteRemovidoEvent',
)


# =============================================================================
# Event Handlers - Clientes
# =============================================================================

@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def record_client_history(self, event_data: Dict[str, Any]) -> bool:
    """
    Grava o evento no histórico do cliente.

    Idempotente: o mesmo `event_id` entregue duas vezes gera um único
    registro.

    Args:
        event_data: Evento serializado (DomainEvent.to_dict)

    Returns:
        True se o registro foi criado, False se já existia
    """
    from backoffice.adapters.django_app.clients.mappers import ClientHistoryMapper
    from backoffice.adapters.django_app.clients.models import ClientHistoryModel

    try:
        history = ClientHistoryMapper.to_model(event_data)

        with transaction.atomic():
            _, created = ClientHistoryModel.objects.get_or_create(
                event_id=history.event_id,
                defaults={
                    'client_id': history.client_id,
                    'event_type': history.event_type,
                    'event_data': history.event_data,
                    'occurred_at': history.occurred_at,
                },
            )

        logger.info(
            f"[HANDLER] {history.event_type}: {history.client_id} | "
            f"{'registrado' if created else 'duplicado'}"
        )
        return created

    except Exception as e:
        logger.error(f"Erro ao registrar histórico de cliente: {e}", exc_info=True)
        raise self.retry(exc=e)


@shared_task(bind=True, ignore_result=True)
def log_domain_event(self, event_type: str, event_data: Dict[str, Any]) -> None:
    """Registra eventos de pedidos e usuários (sem efeito colateral)."""
    logger.info(
        f"[HANDLER] {event_type}: aggregate={event_data.get('aggregate_id')} | "
        f"data={event_data.get('data', {})}"
    )


# =============================================================================
# Event Dispatcher (Router)
# =============================================================================

@shared_task(bind=True, max_retries=5, default_retry_delay=30)
def dispatch_domain_event(self, event_type: str, event_data: Dict[str, Any]) -> None:
    """
    Dispatcher central para Domain Events.

    Args:
        event_type: Tipo do evento (ex: 'ClienteAtualizadoEvent')
        event_data: Dados do evento serializado
    """
    if event_type in CLIENT_EVENTS:
        logger.info(f"[DISPATCHER] Roteando {event_type} para record_client_history")
        record_client_history.delay(event_data)
    else:
        logger.debug(f"[DISPATCHER] {event_type} sem handler específico")
        log_domain_event.delay(event_type, event_data)
