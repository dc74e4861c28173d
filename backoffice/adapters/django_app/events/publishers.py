"""
Event Publishers - Publicadores de Eventos de Domínio.

Chamados pelo Unit of Work depois do commit.
Implementações:
- LoggingEventPublisher: Apenas loga (desenvolvimento, EVENT_PUBLISHER_MODE=sync)
- CeleryEventPublisher: Envia para o dispatcher Celery (EVENT_PUBLISHER_MODE=celery)
- InMemoryEventPublisher: Para testes
- CompositeEventPublisher: Vários destinos ao mesmo tempo
"""

from typing import Callable, Dict, List, Optional
import json
import logging

from backoffice.core.shared.events import DomainEvent
from backoffice.core.shared.interfaces import EventPublisher

logger = logging.getLogger(__name__)


class LoggingEventPublisher(EventPublisher):
    """
    Publisher que apenas loga eventos.

    Usado em desenvolvimento para visualizar eventos
    sem necessidade de broker.
    """

    def __init__(self, log_level: int = logging.INFO):
        self._log_level = log_level

    def publish(self, event: DomainEvent) -> None:
        event_data = event.to_dict()

        logger.log(
            self._log_level,
            f"[EVENT] {event.event_type} | "
            f"aggregate={event.aggregate_id} | "
            f"data={json.dumps(event_data, default=str)}"
        )

    def publish_batch(self, events: List[DomainEvent]) -> None:
        for event in events:
            self.publish(event)


class CeleryEventPublisher(EventPublisher):
    """
    Publisher que envia eventos para Celery.

    O evento viaja serializado (DomainEvent.to_dict) até a task
    `dispatch_domain_event`, que roteia para os handlers.
    """

    def __init__(self, also_log: bool = True):
        self._also_log = also_log

    def publish(self, event: DomainEvent) -> None:
        event_data = event.to_dict()

        if self._also_log:
            logger.info(
                f"[EVENT->CELERY] {event.event_type} | "
                f"aggregate={event.aggregate_id}"
            )

        # Import tardio: handlers importam models Django
        from backoffice.adapters.django_app.events.handlers import dispatch_domain_event

        try:
            dispatch_domain_event.delay(event.event_type, event_data)
        except Exception as e:
            # Commit já aconteceu; falha de broker não desfaz a operação
            logger.error(f"Falha ao publicar evento no Celery: {e}", exc_info=True)

    def publish_batch(self, events: List[DomainEvent]) -> None:
        for event in events:
            self.publish(event)


class InMemoryEventPublisher(EventPublisher):
    """
    Publisher em memória para testes.

    Armazena eventos publicados e executa handlers registrados.
    """

    def __init__(self):
        self._published_events: List[DomainEvent] = []
        self._handlers: Dict[str, List[Callable[[DomainEvent], None]]] = {}

    def publish(self, event: DomainEvent) -> None:
        self._published_events.append(event)
        for handler in self._handlers.get(event.event_type, []):
            handler(event)

    def publish_batch(self, events: List[DomainEvent]) -> None:
        for event in events:
            self.publish(event)

    @property
    def published_events(self) -> List[DomainEvent]:
        """Retorna cópia dos eventos publicados."""
        return self._published_events.copy()

    def clear(self) -> None:
        self._published_events.clear()

    def get_events_by_type(self, event_type: str) -> List[DomainEvent]:
        return [e for e in self._published_events if e.event_type == event_type]

    def register_handler(
        self,
        event_type: str,
        handler: Callable[[DomainEvent], None]
    ) -> None:
        """Registra handler síncrono para tipo de evento."""
        self._handlers.setdefault(event_type, []).append(handler)


class CompositeEventPublisher(EventPublisher):
    """
    Publisher que delega para múltiplos publishers.

    Falha em um destino é logada e não impede os demais.
    """

    def __init__(self, publishers: Optional[List[EventPublisher]] = None):
        self._publishers = list(publishers or [])

    def add_publisher(self, publisher: EventPublisher) -> None:
        self._publishers.append(publisher)

    def publish(self, event: DomainEvent) -> None:
        for publisher in self._publishers:
            try:
                publisher.publish(event)
            except Exception as e:
                logger.error(
                    f"Erro ao publicar em {publisher.__class__.__name__}: {e}",
                    exc_info=True
                )

    def publish_batch(self, events: List[DomainEvent]) -> None:
        for event in events:
            self.publish(event)


def get_event_publisher(mode: str = "sync") -> EventPublisher:
    """
    Factory para obter publisher conforme EVENT_PUBLISHER_MODE.

    Args:
        mode: "celery" para processamento assíncrono, qualquer outro
            valor para apenas logar
    """
    if (mode or "").lower() == "celery":
        return CeleryEventPublisher()
    return LoggingEventPublisher()
