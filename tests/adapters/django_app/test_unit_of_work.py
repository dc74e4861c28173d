"""
Testes do DjangoUnitOfWork.

Dentro do pytest-django o bloco atomic do UoW vira savepoint,
então commit e rollback são observáveis na mesma conexão.
"""

import pytest

from backoffice.adapters.django_app.clients.models import ClientModel
from backoffice.adapters.django_app.events.publishers import InMemoryEventPublisher
from backoffice.adapters.django_app.shared.unit_of_work import DjangoUnitOfWork
from backoffice.core.clients.entities import ClientEntity
from backoffice.core.clients.events import ClienteCriadoEvent
from backoffice.core.shared.interfaces import EventPublisher


pytestmark = pytest.mark.django_db


class FailingPublisher(EventPublisher):
    def publish(self, event):
        raise RuntimeError("broker indisponível")

    def publish_batch(self, events):
        for event in events:
            self.publish(event)


@pytest.fixture
def publisher():
    return InMemoryEventPublisher()


def test_commit_persiste_e_publica(client_repository, publisher):
    client = ClientEntity.criar(name="ACME")

    with DjangoUnitOfWork(event_publisher=publisher) as uow:
        client_repository.create(client)
        uow.publish_event(ClienteCriadoEvent(aggregate_id=client.id, name=client.name))
        # Nada publicado antes do commit
        assert publisher.published_events == []

    assert uow.is_committed
    assert ClientModel.objects.filter(id=client.id).exists()
    assert [e.event_type for e in publisher.published_events] == ["ClienteCriadoEvent"]


def test_excecao_desfaz_escrita_e_descarta_eventos(client_repository, publisher):
    client = ClientEntity.criar(name="ACME")

    with pytest.raises(ValueError):
        with DjangoUnitOfWork(event_publisher=publisher) as uow:
            client_repository.create(client)
            uow.publish_event(ClienteCriadoEvent(aggregate_id=client.id))
            raise ValueError("falha no meio do use case")

    assert uow.is_rolled_back
    assert not ClientModel.objects.filter(id=client.id).exists()
    assert publisher.published_events == []
    assert uow.collect_events() == []


def test_falha_do_publisher_nao_desfaz_commit(client_repository):
    client = ClientEntity.criar(name="ACME")

    with DjangoUnitOfWork(event_publisher=FailingPublisher()) as uow:
        client_repository.create(client)
        uow.publish_event(ClienteCriadoEvent(aggregate_id=client.id))

    assert uow.is_committed
    assert ClientModel.objects.filter(id=client.id).exists()


def test_sem_publisher_apenas_commita(client_repository):
    client = ClientEntity.criar(name="ACME")

    with DjangoUnitOfWork() as uow:
        client_repository.create(client)
        uow.publish_event(ClienteCriadoEvent(aggregate_id=client.id))

    assert uow.is_committed
    assert uow.collect_events() == []
