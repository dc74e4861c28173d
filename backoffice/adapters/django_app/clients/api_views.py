"""
API Views JSON para o domínio de Clientes.

Endpoints:
- GET /clients/api/ - Listar clientes (page, take, filter)
- POST /clients/api/ - Criar cliente
- GET /clients/api/<id>/ - Obter cliente
- PATCH /clients/api/<id>/ - Atualizar cliente
- DELETE /clients/api/<id>/ - Excluir cliente
"""

import logging

from django.http import HttpRequest, JsonResponse

from backoffice.adapters.django_app.shared.api import (
    BaseAPIView,
    json_response,
    paginated_response,
    parse_pagination,
    require_text_fields,
)
from backoffice.core.clients.dtos import AtualizarClienteInputDTO, CriarClienteInputDTO

logger = logging.getLogger(__name__)


# Campos aceitos no PATCH (client_id vem da URL)
CAMPOS_ATUALIZAVEIS = (
    'cnpj',
    'cep',
    'nfe_email',
    'address_number',
    'corporate_name',
    'fantasy_name',
    'name',
    'phone',
    'state_registration',
)

# Campos de texto aceitos no POST
CAMPOS_CRIACAO = CAMPOS_ATUALIZAVEIS + ('person_type', 'cpf')


class ClientAPIListView(BaseAPIView):
    """
    API para listar e criar clientes.

    GET /clients/api/ - Lista clientes
    POST /clients/api/ - Cria cliente
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        """
        Lista clientes paginados.

        Query params:
        - page: Página (default: 1)
        - take: Itens por página (default: PAGINATION_DEFAULT_TAKE)
        - filter: Texto buscado em nome, razão social, nome fantasia e CNPJ
        """
        try:
            pagination = parse_pagination(request)
            listar_service = self.get_service('listar_clientes_service')

            page = listar_service.execute(pagination, request.GET.get('filter', ''))

            return paginated_response(page)

        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Cria novo cliente.

        Body JSON:
        {
            "name": "string (obrigatório)",
            "person_type": "LEGAL|PHYSICAL (opcional)",
            "cnpj": "string (opcional)",
            "nfe_email": "string (opcional)",
            "cep": "string (opcional)",
            ...
        }
        """
        try:
            data = self.parse_body(request)
            require_text_fields(data, CAMPOS_CRIACAO)

            criar_service = self.get_service('criar_cliente_service')

            input_dto = CriarClienteInputDTO(
                name=data.get('name', ''),
                person_type=data.get('person_type', 'LEGAL'),
                cnpj=data.get('cnpj'),
                cpf=data.get('cpf'),
                nfe_email=data.get('nfe_email'),
                cep=data.get('cep'),
                address_number=data.get('address_number'),
                corporate_name=data.get('corporate_name'),
                fantasy_name=data.get('fantasy_name'),
                phone=data.get('phone'),
                state_registration=data.get('state_registration'),
            )

            output = criar_service.execute(input_dto)

            logger.info(f"API: Cliente criado: {output.id}")

            return json_response(
                success=True,
                data=output.to_dict(),
                status=201
            )

        except Exception as e:
            return self.handle_exception(e)


class ClientAPIDetailView(BaseAPIView):
    """
    API para operações em cliente específico.

    GET /clients/api/<id>/ - Obter cliente
    PATCH /clients/api/<id>/ - Atualizar cliente
    DELETE /clients/api/<id>/ - Excluir cliente
    """

    def get(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            obter_service = self.get_service('obter_cliente_service')
            client = obter_service.execute(pk)

            return json_response(success=True, data=client.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def patch(self, request: HttpRequest, pk: str) -> JsonResponse:
        """
        Atualiza cliente.

        Campos ausentes, nulos ou vazios não são alterados. Quando
        `cep` é enviado, o endereço é recalculado pela consulta de CEP.
        """
        try:
            data = self.parse_body(request)
            require_text_fields(data, CAMPOS_ATUALIZAVEIS)

            campos = {campo: data.get(campo) for campo in CAMPOS_ATUALIZAVEIS}
            input_dto = AtualizarClienteInputDTO(client_id=pk, **campos)

            atualizar_service = self.get_service('atualizar_cliente_service')
            output = atualizar_service.execute(input_dto)

            logger.info(f"API: Cliente {pk} atualizado")

            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            remover_service = self.get_service('remover_cliente_service')
            output = remover_service.execute(pk)

            logger.info(f"API: Cliente {pk} removido")

            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)
