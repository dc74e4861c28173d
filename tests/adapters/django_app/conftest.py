"""
Fixtures para testes dos adapters Django.

O banco de testes (SQLite) é criado pelo pytest-django a partir
das migrations dos apps.
"""

import pytest

from backoffice.adapters.django_app.clients.repositories import DjangoClientRepository
from backoffice.adapters.django_app.orders.repositories import DjangoOrderRepository
from backoffice.adapters.django_app.users.repositories import DjangoUserRepository
from backoffice.core.clients.entities import ClientEntity


@pytest.fixture
def client_repository():
    return DjangoClientRepository()


@pytest.fixture
def order_repository():
    return DjangoOrderRepository()


@pytest.fixture
def user_repository():
    return DjangoUserRepository()


@pytest.fixture
def client_factory(client_repository):
    """Factory que persiste clientes no banco de testes."""

    def create_client(**kwargs):
        defaults = {'name': 'Cliente de Teste'}
        defaults.update(kwargs)
        return client_repository.create(ClientEntity.criar(**defaults))

    return create_client
