"""
Testes para as API Views JSON.

Testa:
- Envelope {success, data/error, meta}
- Tradução de exceções para status HTTP
- Paginação via query string
- Integração com Container DI (infraestrutura em memória)
"""

import json
from decimal import Decimal
from unittest.mock import Mock, patch

import pytest
from django.test import RequestFactory

from backoffice.adapters.django_app.clients.api_views import ClientAPIDetailView, ClientAPIListView
from backoffice.adapters.django_app.orders.api_views import (
    OrderAPIByNumberView,
    OrderAPIDetailView,
    OrderAPIListView,
)
from backoffice.adapters.django_app.shared.api import json_response, parse_pagination
from backoffice.adapters.django_app.users.api_views import UserAPIDetailView, UserAPIListView
from backoffice.config.container import get_testing_container
from backoffice.core.clients.ports import AddressInfo
from backoffice.core.orders.entities import OrderEntity
from backoffice.core.shared.exceptions import ValidationError


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def rf():
    """Request Factory para criar requests."""
    return RequestFactory()


@pytest.fixture
def container():
    """Container com infraestrutura em memória no lugar do global."""
    container = get_testing_container()
    container.cep_provider().add(
        AddressInfo("01001-000", "Praça da Sé", "", "Sé", "São Paulo", "SP")
    )
    with patch('backoffice.adapters.django_app.shared.api.get_container', return_value=container):
        yield container


def body(response):
    return json.loads(response.content)


def post_json(rf, path, data):
    return rf.post(path, data=json.dumps(data), content_type='application/json')


def patch_json(rf, path, data):
    return rf.patch(path, data=json.dumps(data), content_type='application/json')


# =============================================================================
# Clientes
# =============================================================================

class TestClientAPI:

    def test_post_cria_cliente(self, rf, container):
        request = post_json(rf, '/clients/api/', {
            'name': 'ACME',
            'cnpj': '12345678000195',
            'cep': '01001000',
        })

        response = ClientAPIListView().post(request)

        assert response.status_code == 201
        data = body(response)
        assert data['success'] is True
        assert data['data']['cnpj'] == '12 345 678/0001-95'
        assert data['data']['address'] == 'Praça da Sé, Sé, São Paulo - SP'
        assert container.client_repository().count() == 1

    def test_post_sem_nome(self, rf, container):
        response = ClientAPIListView().post(post_json(rf, '/clients/api/', {'name': ''}))

        assert response.status_code == 400
        data = body(response)
        assert data['success'] is False
        assert data['meta'] == {'code': 'VALIDATION_ERROR_NAME', 'field': 'name'}

    def test_post_json_invalido(self, rf, container):
        request = rf.post('/clients/api/', data='{nome', content_type='application/json')

        response = ClientAPIListView().post(request)

        assert response.status_code == 400
        assert 'JSON inválido' in body(response)['error']

    def test_post_cnpj_duplicado(self, rf, container):
        ClientAPIListView().post(post_json(rf, '/clients/api/', {'name': 'A', 'cnpj': '12345678000195'}))

        response = ClientAPIListView().post(
            post_json(rf, '/clients/api/', {'name': 'B', 'cnpj': '12.345.678/0001-95'})
        )

        assert response.status_code == 409
        assert body(response)['error'] == 'CNPJ já está em uso.'
        assert body(response)['meta']['field'] == 'cnpj'

    def test_post_cep_desconhecido(self, rf, container):
        response = ClientAPIListView().post(
            post_json(rf, '/clients/api/', {'name': 'ACME', 'cep': '99999999'})
        )

        assert response.status_code == 502
        assert body(response)['meta'] == {'code': 'UPSTREAM_FAILURE', 'service': 'cep'}
        assert container.client_repository().count() == 0

    def test_get_lista_paginada_com_filtro(self, rf, container):
        for name in ('ACME', 'Padaria', 'ACME Filial'):
            ClientAPIListView().post(post_json(rf, '/clients/api/', {'name': name}))

        response = ClientAPIListView().get(rf.get('/clients/api/', {'filter': 'acme', 'take': 1}))

        assert response.status_code == 200
        data = body(response)
        assert len(data['data']) == 1
        assert data['meta']['total'] == 2
        assert data['meta']['total_paginas'] == 2
        assert data['meta']['tem_proxima'] is True

    def test_get_take_fora_do_intervalo(self, rf, container):
        response = ClientAPIListView().get(rf.get('/clients/api/', {'take': 101}))

        assert response.status_code == 400
        assert body(response)['meta']['field'] == 'take'

    def test_get_cliente_inexistente(self, rf, container):
        response = ClientAPIDetailView().get(rf.get('/clients/api/x/'), pk='nao-existe')

        assert response.status_code == 404
        assert body(response)['success'] is False

    def test_patch_altera_apenas_campos_presentes(self, rf, container):
        criado = body(ClientAPIListView().post(
            post_json(rf, '/clients/api/', {'name': 'ACME', 'phone': '1130000000'})
        ))['data']

        response = ClientAPIDetailView().patch(
            patch_json(rf, '/clients/api/x/', {'cep': '01001-000', 'phone': '', 'name': None}),
            pk=criado['id'],
        )

        assert response.status_code == 200
        data = body(response)['data']
        assert data['cep'] == '01001-000'
        assert data['address'] == 'Praça da Sé, Sé, São Paulo - SP'
        assert data['phone'] == '1130000000'
        assert data['name'] == 'ACME'

    def test_patch_cliente_inexistente(self, rf, container):
        response = ClientAPIDetailView().patch(
            patch_json(rf, '/clients/api/x/', {'phone': '1'}), pk='nao-existe'
        )

        assert response.status_code == 404

    @pytest.mark.parametrize('campo, valor', [
        ('cnpj', 12345678000195),
        ('cep', 1001000),
        ('name', ['ACME']),
        ('nfe_email', {'email': 'nfe@acme.com'}),
    ])
    def test_patch_campo_que_nao_e_texto(self, rf, container, campo, valor):
        criado = body(ClientAPIListView().post(post_json(rf, '/clients/api/', {'name': 'ACME'})))['data']

        response = ClientAPIDetailView().patch(
            patch_json(rf, '/clients/api/x/', {campo: valor}), pk=criado['id']
        )

        assert response.status_code == 400
        assert body(response)['meta']['field'] == campo
        assert container.cep_provider().calls == []

    @pytest.mark.parametrize('campo, valor', [
        ('cnpj', 12345678000195),
        ('cep', 1001000),
        ('person_type', 1),
        ('name', 42),
    ])
    def test_post_campo_que_nao_e_texto(self, rf, container, campo, valor):
        payload = {'name': 'ACME'}
        payload[campo] = valor

        response = ClientAPIListView().post(post_json(rf, '/clients/api/', payload))

        assert response.status_code == 400
        assert body(response)['meta']['field'] == campo
        assert container.client_repository().count() == 0

    def test_patch_nfe_email_e_nome_invalidos(self, rf, container):
        criado = body(ClientAPIListView().post(post_json(rf, '/clients/api/', {'name': 'ACME'})))['data']

        response = ClientAPIDetailView().patch(
            patch_json(rf, '/clients/api/x/', {'nfe_email': 'nao-e-email', 'name': 'N' * 400}),
            pk=criado['id'],
        )

        assert response.status_code == 400
        assert body(response)['meta']['field'] == 'nfe_email'
        salvo = container.client_repository().get_by_id(criado['id'])
        assert salvo.nfe_email is None
        assert salvo.name == 'ACME'

    def test_patch_nome_longo(self, rf, container):
        criado = body(ClientAPIListView().post(post_json(rf, '/clients/api/', {'name': 'ACME'})))['data']

        response = ClientAPIDetailView().patch(
            patch_json(rf, '/clients/api/x/', {'name': 'N' * 400}), pk=criado['id']
        )

        assert response.status_code == 400
        assert body(response)['meta']['field'] == 'name'

    def test_patch_cnpj_de_outro_cliente(self, rf, container):
        ClientAPIListView().post(post_json(rf, '/clients/api/', {'name': 'A', 'cnpj': '12345678000195'}))
        b = body(ClientAPIListView().post(post_json(rf, '/clients/api/', {'name': 'B'})))['data']

        response = ClientAPIDetailView().patch(
            patch_json(rf, '/clients/api/x/', {'cnpj': '12.345.678/0001-95'}), pk=b['id']
        )

        assert response.status_code == 409
        assert body(response)['error'] == 'CNPJ já está em uso.'
        assert body(response)['meta']['field'] == 'cnpj'
        assert container.client_repository().get_by_id(b['id']).cnpj is None

    def test_patch_nfe_email_ja_usado(self, rf, container):
        ClientAPIListView().post(post_json(rf, '/clients/api/', {'name': 'A', 'nfe_email': 'nfe@a.com'}))
        b = body(ClientAPIListView().post(post_json(rf, '/clients/api/', {'name': 'B'})))['data']

        response = ClientAPIDetailView().patch(
            patch_json(rf, '/clients/api/x/', {'nfe_email': 'nfe@a.com'}), pk=b['id']
        )

        assert response.status_code == 409
        assert body(response)['meta']['field'] == 'nfe_email'

    def test_patch_cep_desconhecido(self, rf, container):
        criado = body(ClientAPIListView().post(post_json(rf, '/clients/api/', {'name': 'ACME'})))['data']

        response = ClientAPIDetailView().patch(
            patch_json(rf, '/clients/api/x/', {'cep': '99999999', 'phone': '1130000000'}),
            pk=criado['id'],
        )

        assert response.status_code == 502
        assert body(response)['meta'] == {'code': 'UPSTREAM_FAILURE', 'service': 'cep'}
        salvo = container.client_repository().get_by_id(criado['id'])
        assert salvo.cep is None
        assert salvo.phone is None

    def test_delete_remove_cliente(self, rf, container):
        criado = body(ClientAPIListView().post(post_json(rf, '/clients/api/', {'name': 'ACME'})))['data']

        response = ClientAPIDetailView().delete(rf.delete('/clients/api/x/'), pk=criado['id'])

        assert response.status_code == 200
        assert body(response)['data']['id'] == criado['id']
        assert container.client_repository().count() == 0

    def test_erro_inesperado_vira_500(self, rf, container):
        quebrado = Mock()
        quebrado.execute.side_effect = RuntimeError("conexão perdida")

        with patch.object(ClientAPIDetailView, 'get_service', return_value=quebrado):
            response = ClientAPIDetailView().get(rf.get('/clients/api/x/'), pk='abc')

        assert response.status_code == 500
        assert body(response)['error'] == 'Erro interno do servidor'


# =============================================================================
# Pedidos
# =============================================================================

class TestOrderAPI:

    @pytest.fixture
    def pedido(self, container):
        order = OrderEntity.criar(
            order_number='PED-001',
            client_name='ACME',
            total_value=Decimal('150.00'),
        )
        return container.order_repository().create(order)

    def test_get_lista(self, rf, container, pedido):
        response = OrderAPIListView().get(rf.get('/orders/api/'))

        assert response.status_code == 200
        data = body(response)
        assert [o['order_number'] for o in data['data']] == ['PED-001']
        assert data['meta']['total'] == 1

    def test_get_por_numero(self, rf, container, pedido):
        response = OrderAPIByNumberView().get(rf.get('/orders/api/numero/PED-001/'), order_number='PED-001')

        assert response.status_code == 200
        assert body(response)['data']['id'] == pedido.id

    def test_get_por_numero_inexistente(self, rf, container):
        response = OrderAPIByNumberView().get(rf.get('/orders/api/numero/X/'), order_number='X')

        assert response.status_code == 404

    def test_delete(self, rf, container, pedido):
        response = OrderAPIDetailView().delete(rf.delete('/orders/api/x/'), pk=pedido.id)

        assert response.status_code == 200
        assert container.order_repository().get_by_id(pedido.id) is None


# =============================================================================
# Usuários
# =============================================================================

class TestUserAPI:

    def criar_usuario(self, rf, **dados):
        payload = {'name': 'Admin', 'email': 'admin@empresa.com', 'password': 'segredo123'}
        payload.update(dados)
        return UserAPIListView().post(post_json(rf, '/users/api/', payload))

    def test_post_cria_usuario_sem_expor_hash(self, rf, container):
        response = self.criar_usuario(rf, role='ADMIN')

        assert response.status_code == 201
        data = body(response)['data']
        assert data['email'] == 'admin@empresa.com'
        assert data['role'] == 'ADMIN'
        assert 'password' not in data
        assert 'password_hash' not in data

    def test_post_email_duplicado(self, rf, container):
        self.criar_usuario(rf)

        response = self.criar_usuario(rf, name='Outro')

        assert response.status_code == 409
        assert body(response)['meta']['field'] == 'email'

    def test_delete_proprio_usuario_e_proibido(self, rf, container):
        user_id = body(self.criar_usuario(rf))['data']['id']

        request = rf.delete('/users/api/x/', HTTP_X_USER_ID=user_id)
        response = UserAPIDetailView().delete(request, pk=user_id)

        assert response.status_code == 422
        assert body(response)['meta']['rule'] == 'auto_remocao_proibida'
        assert container.user_repository().get_by_id(user_id) is not None

    def test_delete_outro_usuario(self, rf, container):
        user_id = body(self.criar_usuario(rf))['data']['id']

        request = rf.delete('/users/api/x/', HTTP_X_USER_ID='outro-admin')
        response = UserAPIDetailView().delete(request, pk=user_id)

        assert response.status_code == 200
        assert container.user_repository().get_by_id(user_id) is None


# =============================================================================
# Helpers
# =============================================================================

class TestHelpers:

    def test_json_response_com_meta(self):
        response = json_response(success=True, data=[], meta={'total': 0})

        data = body(response)
        assert data == {'success': True, 'data': [], 'meta': {'total': 0}}

    def test_json_response_erro(self):
        response = json_response(success=False, error='Algo deu errado', status=400)

        assert response.status_code == 400
        assert body(response) == {'success': False, 'error': 'Algo deu errado'}

    def test_parse_pagination_defaults(self, rf, settings):
        settings.PAGINATION_DEFAULT_TAKE = 5

        pagination = parse_pagination(rf.get('/clients/api/'))

        assert (pagination.page, pagination.take, pagination.skip) == (1, 5, 0)

    def test_parse_pagination_nao_numerico(self, rf):
        with pytest.raises(ValidationError):
            parse_pagination(rf.get('/clients/api/', {'page': 'abc'}))
