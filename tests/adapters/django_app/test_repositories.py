"""
Testes dos repositórios Django (banco SQLite de testes).

Cobrem mapeamento Entity <-> Model, paginação com filtro e a
tradução de IntegrityError em ConflictError.
"""

from datetime import datetime
from decimal import Decimal

import pytest

from backoffice.adapters.django_app.clients.models import ClientModel
from backoffice.core.clients.entities import ClientEntity
from backoffice.core.orders.entities import OrderEntity
from backoffice.core.shared.dtos import PaginacaoInputDTO
from backoffice.core.shared.exceptions import ConflictError, EntityNotFoundError
from backoffice.core.users.entities import UserEntity, UserRole


pytestmark = pytest.mark.django_db


class TestDjangoClientRepository:

    def test_create_e_get_by_id(self, client_repository, client_factory):
        client = client_factory(
            name="ACME",
            cnpj="12345678000195",
            nfe_email="nfe@acme.com",
            phone="1130000000",
        )

        loaded = client_repository.get_by_id(client.id)

        assert loaded == client
        assert loaded.cnpj == "12 345 678/0001-95"
        assert loaded.nfe_email == "nfe@acme.com"
        assert loaded.phone == "1130000000"
        assert loaded.created_at.tzinfo is not None

    def test_get_by_id_inexistente(self, client_repository):
        assert client_repository.get_by_id("nao-existe") is None

    def test_get_by_cnpj_e_nfe_email(self, client_repository, client_factory):
        client = client_factory(cnpj="12345678000195", nfe_email="nfe@acme.com")

        assert client_repository.get_by_cnpj("12 345 678/0001-95").id == client.id
        assert client_repository.get_by_nfe_email("nfe@acme.com").id == client.id
        assert client_repository.get_by_cnpj("00 000 000/0000-00") is None

    def test_clientes_sem_cnpj_nao_colidem(self, client_repository, client_factory):
        client_factory(name="A")
        client_factory(name="B")

        assert ClientModel.objects.filter(cnpj__isnull=True).count() == 2

    def test_update_sobrescreve_registro(self, client_repository, client_factory):
        client = client_factory(name="ACME", phone="1")

        client.atualizar_campos({"phone": "2", "cep": "01001-000", "address": "Praça da Sé"})
        client_repository.update(client)

        loaded = client_repository.get_by_id(client.id)
        assert loaded.phone == "2"
        assert loaded.cep == "01001-000"
        assert loaded.address == "Praça da Sé"
        assert loaded.name == "ACME"

    def test_update_inexistente(self, client_repository):
        with pytest.raises(EntityNotFoundError):
            client_repository.update(ClientEntity.criar(name="Fantasma"))

    def test_create_cnpj_duplicado_vira_conflict(self, client_repository, client_factory):
        client_factory(name="A", cnpj="12345678000195")

        with pytest.raises(ConflictError) as exc_info:
            client_factory(name="B", cnpj="12.345.678/0001-95")

        assert exc_info.value.field == "cnpj"
        assert exc_info.value.message == "CNPJ já está em uso."

    def test_update_nfe_email_duplicado_vira_conflict(self, client_repository, client_factory):
        client_factory(name="A", nfe_email="nfe@a.com")
        b = client_factory(name="B", nfe_email="nfe@b.com")

        b.nfe_email = "nfe@a.com"
        with pytest.raises(ConflictError) as exc_info:
            client_repository.update(b)

        assert exc_info.value.field == "nfe_email"
        assert client_repository.get_by_id(b.id).nfe_email == "nfe@b.com"

    def test_list_paginated_com_filtro(self, client_repository, client_factory):
        client_factory(name="ACME Ferramentas", fantasy_name="Acme")
        client_factory(name="Padaria", corporate_name="Pães ACME LTDA")
        client_factory(name="Mercado", cnpj="98765432000110")

        page = client_repository.list_paginated(PaginacaoInputDTO(page=1, take=5), "acme")
        assert page.total == 2

        page = client_repository.list_paginated(PaginacaoInputDTO(page=1, take=5), "98 765")
        assert [c.name for c in page.items] == ["Mercado"]

    def test_list_paginated_pula_registros(self, client_repository, client_factory):
        for i in range(6):
            client_factory(name=f"Cliente {i}", created_at=datetime(2024, 1, 1, 10, i))

        page = client_repository.list_paginated(PaginacaoInputDTO(page=2, take=5))

        assert page.total == 6
        assert [c.name for c in page.items] == ["Cliente 5"]
        assert page.total_paginas == 2

    def test_delete(self, client_repository, client_factory):
        client = client_factory()

        assert client_repository.delete(client.id) is True
        assert client_repository.get_by_id(client.id) is None
        assert client_repository.delete(client.id) is False


class TestDjangoOrderRepository:

    def test_create_e_buscas(self, order_repository, client_factory):
        client = client_factory(name="ACME")
        order = OrderEntity.criar(
            order_number="PED-1",
            client_id=client.id,
            client_name=client.name,
            total_value=Decimal("10.50"),
        )
        order_repository.create(order)

        loaded = order_repository.get_by_id(order.id)
        assert loaded.total_value == Decimal("10.50")
        assert loaded.client_id == client.id
        assert order_repository.get_by_order_number("PED-1").id == order.id

    def test_numero_duplicado_vira_conflict(self, order_repository):
        order_repository.create(OrderEntity.criar(order_number="PED-1"))

        with pytest.raises(ConflictError) as exc_info:
            order_repository.create(OrderEntity.criar(order_number="PED-1"))

        assert exc_info.value.field == "order_number"

    def test_excluir_cliente_mantem_pedido(self, order_repository, client_repository, client_factory):
        client = client_factory(name="ACME")
        order = OrderEntity.criar(order_number="PED-1", client_id=client.id, client_name="ACME")
        order_repository.create(order)

        client_repository.delete(client.id)

        loaded = order_repository.get_by_id(order.id)
        assert loaded.client_id is None
        assert loaded.client_name == "ACME"

    def test_filtro_por_nome_do_cliente(self, order_repository):
        order_repository.create(OrderEntity.criar(order_number="PED-1", client_name="Padaria Central"))
        order_repository.create(OrderEntity.criar(order_number="PED-2", client_name="ACME"))

        page = order_repository.list_paginated(PaginacaoInputDTO(), "central")

        assert [o.order_number for o in page.items] == ["PED-1"]


class TestDjangoUserRepository:

    def test_create_e_get_by_email(self, user_repository):
        user = UserEntity.criar(
            name="Admin", email="admin@empresa.com", password_hash="hash", role=UserRole.ADMIN,
        )
        user_repository.create(user)

        loaded = user_repository.get_by_email("admin@empresa.com")
        assert loaded.id == user.id
        assert loaded.role is UserRole.ADMIN
        assert loaded.password_hash == "hash"

    def test_email_duplicado_vira_conflict(self, user_repository):
        user_repository.create(UserEntity.criar(name="A", email="a@empresa.com", password_hash="h"))

        with pytest.raises(ConflictError) as exc_info:
            user_repository.create(UserEntity.criar(name="B", email="a@empresa.com", password_hash="h"))

        assert exc_info.value.message == "E-mail já está em uso."
