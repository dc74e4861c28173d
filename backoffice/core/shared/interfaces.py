"""
Interfaces (Ports) compartilhadas entre Core e Adapters.

Os domínios (clientes, pedidos, usuários) definem seus próprios
repositórios em `ports.py`; aqui ficam apenas os contratos
transversais: transação (UnitOfWork) e publicação de eventos.

Princípio: Core define interfaces; Adapters implementam.
"""

from abc import ABC, abstractmethod
from typing import List

from .events import DomainEvent


class UnitOfWork(ABC):
    """
    Unit of Work - Coordena transações atômicas.

    Todas as leituras de unicidade, a escrita e o enfileiramento de
    eventos de um use case acontecem dentro do mesmo bloco `with`.

    Pattern: Context Manager
        with uow:
            client_repo.update(client)
            uow.publish_event(ClienteAtualizadoEvent(aggregate_id=client.id))
        # Commit automático ao sair sem erro
        # Rollback automático se exceção

    Eventos só são publicados após commit bem-sucedido. Em rollback
    são descartados.
    """

    def __init__(self):
        self._events: List[DomainEvent] = []

    def __enter__(self) -> "UnitOfWork":
        self._begin_transaction()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False  # Não suprime exceções

    @abstractmethod
    def _begin_transaction(self) -> None:
        """Inicia uma nova transação."""
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        """
        Persiste todas as mudanças e publica eventos.

        Ordem de execução:
        1. Commit da transação no banco
        2. Publicação de eventos enfileirados
        3. Limpeza de estado interno
        """
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """Desfaz todas as mudanças e descarta eventos."""
        raise NotImplementedError

    def publish_event(self, event: DomainEvent) -> None:
        """
        Enfileira evento para publicação após commit.

        Args:
            event: Evento de domínio a ser publicado
        """
        self._events.append(event)

    def collect_events(self) -> List[DomainEvent]:
        """Retorna eventos enfileirados (para testing/debugging)."""
        return list(self._events)

    def clear_events(self) -> None:
        """Limpa fila de eventos."""
        self._events.clear()


class InMemoryUnitOfWork(UnitOfWork):
    """
    Unit of Work em memória, sem banco de dados.

    Usado pelos testes unitários dos use cases e pelo TestingContainer.
    Eventos confirmados ficam em `published_events`.

    Example:
        uow = InMemoryUnitOfWork()
        service = RemoverClienteService(repo, uow)
        service.execute(client_id)
        assert uow.published_events[0].event_type == "ClienteRemovidoEvent"
    """

    def __init__(self):
        super().__init__()
        self.published_events: List[DomainEvent] = []
        self.committed = False
        self.rolled_back = False

    def _begin_transaction(self) -> None:
        self.committed = False
        self.rolled_back = False

    def commit(self) -> None:
        self.published_events.extend(self._events)
        self.clear_events()
        self.committed = True

    def rollback(self) -> None:
        self.clear_events()
        self.rolled_back = True


class EventPublisher(ABC):
    """
    Interface para publicação de eventos.

    Adapters implementam para integrar com diferentes sistemas
    de mensageria (Celery, logging, memória).
    """

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """Publica evento para consumidores."""
        raise NotImplementedError

    @abstractmethod
    def publish_batch(self, events: List[DomainEvent]) -> None:
        """Publica múltiplos eventos em batch."""
        raise NotImplementedError


# Type alias para facilitar tipagem
UoW = UnitOfWork
