"""
Unit of Work - Implementação Django.

Gerencia a transação que envolve um use case inteiro: leituras de
unicidade, escrita e enfileiramento de eventos.

Responsabilidades:
- Abrir/fechar o bloco `transaction.atomic`
- Commit/Rollback coordenado
- Publicar eventos após commit bem-sucedido

Com `transaction.atomic` o UoW funciona também dentro de uma transação
externa (testes com pytest-django), virando um savepoint.
"""

from typing import Optional
import logging

from django.db import transaction

from backoffice.core.shared.interfaces import EventPublisher, UnitOfWork

logger = logging.getLogger(__name__)


class DjangoUnitOfWork(UnitOfWork):
    """
    Implementação Django do Unit of Work.

    Example:
        with DjangoUnitOfWork(event_publisher=publisher) as uow:
            client_repo.update(client)
            uow.publish_event(ClienteAtualizadoEvent(aggregate_id=client.id))
        # Commit automático + eventos publicados

    Example com rollback:
        with DjangoUnitOfWork() as uow:
            client_repo.update(client)
            raise ConflictError("CNPJ já está em uso.")
        # Rollback automático, eventos descartados
    """

    def __init__(self, event_publisher: Optional[EventPublisher] = None, using: Optional[str] = None):
        """
        Args:
            event_publisher: Publicador de eventos (Celery, logging, memória)
            using: Alias do banco (default: "default")
        """
        super().__init__()
        self._event_publisher = event_publisher
        self._using = using
        self._atomic = None
        self._exc_info = (None, None, None)
        self._committed = False
        self._rolled_back = False

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self._exc_info = (exc_type, exc_val, exc_tb)
        return super().__exit__(exc_type, exc_val, exc_tb)

    def _begin_transaction(self) -> None:
        self._committed = False
        self._rolled_back = False
        self._exc_info = (None, None, None)
        self._atomic = transaction.atomic(using=self._using)
        self._atomic.__enter__()
        logger.debug("Transaction started")

    def commit(self) -> None:
        """
        Persiste as mudanças e publica eventos.

        Ordem de execução:
        1. Saída do bloco atomic (commit ou release do savepoint)
        2. Publicação dos eventos enfileirados
        """
        if self._committed or self._rolled_back:
            logger.warning("Transaction already finalized")
            return

        if self._atomic is not None:
            try:
                self._atomic.__exit__(None, None, None)
            except Exception as e:
                logger.error(f"Commit failed: {e}")
                self._rolled_back = True
                self._atomic = None
                self.clear_events()
                raise
            self._atomic = None
            logger.debug("Transaction committed")

        self._committed = True

        if self._events:
            self._publish_events()

    def rollback(self) -> None:
        """
        Desfaz as mudanças e descarta eventos.

        Chamado automaticamente se exceção ocorrer dentro do contexto.
        """
        if self._committed or self._rolled_back:
            return

        try:
            if self._atomic is not None:
                exc_type, exc_val, exc_tb = self._exc_info
                if exc_type is None:
                    exc_type, exc_val = RuntimeError, RuntimeError("rollback")
                self._atomic.__exit__(exc_type, exc_val, exc_tb)
                logger.debug("Transaction rolled back")
        finally:
            self._atomic = None
            self._rolled_back = True
            self.clear_events()

    def _publish_events(self) -> None:
        """
        Publica eventos após commit.

        Falha de publicação é registrada mas não desfaz o commit.
        """
        for event in self._events:
            logger.info(
                f"Publishing event: {event.event_type} "
                f"for aggregate {event.aggregate_id}"
            )

            if self._event_publisher:
                try:
                    self._event_publisher.publish(event)
                except Exception as e:
                    logger.error(f"Failed to publish event: {e}", exc_info=True)

        self.clear_events()

    @property
    def is_committed(self) -> bool:
        return self._committed

    @property
    def is_rolled_back(self) -> bool:
        return self._rolled_back
