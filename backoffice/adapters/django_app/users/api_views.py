"""
API Views JSON para o domínio de Usuários.

Endpoints:
- GET /users/api/ - Listar usuários (page, take, filter)
- POST /users/api/ - Criar usuário
- GET /users/api/<id>/ - Obter usuário
- PATCH /users/api/<id>/ - Atualizar usuário
- DELETE /users/api/<id>/ - Excluir usuário

O usuário autenticado é identificado pelo header X-User-Id; sem ele
a exclusão não aplica a regra de auto-remoção.
"""

import logging

from django.http import HttpRequest, JsonResponse

from backoffice.adapters.django_app.shared.api import (
    BaseAPIView,
    get_user_id,
    json_response,
    paginated_response,
    parse_pagination,
)
from backoffice.core.users.dtos import (
    AtualizarUsuarioInputDTO,
    CriarUsuarioInputDTO,
    RemoverUsuarioInputDTO,
)

logger = logging.getLogger(__name__)


class UserAPIListView(BaseAPIView):
    """
    GET /users/api/ - Lista usuários
    POST /users/api/ - Cria usuário
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            pagination = parse_pagination(request)
            listar_service = self.get_service('listar_usuarios_service')

            page = listar_service.execute(pagination, request.GET.get('filter', ''))

            return paginated_response(page)

        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Cria novo usuário.

        Body JSON:
        {
            "name": "string (obrigatório)",
            "email": "string (obrigatório)",
            "password": "string (obrigatório, mínimo 6)",
            "role": "ADMIN|USER (opcional)"
        }
        """
        try:
            data = self.parse_body(request)

            input_dto = CriarUsuarioInputDTO(
                name=data.get('name', ''),
                email=data.get('email', ''),
                password=data.get('password', ''),
                role=data.get('role') or 'USER',
            )

            criar_service = self.get_service('criar_usuario_service')
            output = criar_service.execute(input_dto)

            logger.info(f"API: Usuário criado: {output.id}")

            return json_response(success=True, data=output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class UserAPIDetailView(BaseAPIView):
    """
    GET /users/api/<id>/ - Obter usuário
    PATCH /users/api/<id>/ - Atualizar usuário
    DELETE /users/api/<id>/ - Excluir usuário
    """

    def get(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            obter_service = self.get_service('obter_usuario_service')
            user = obter_service.execute(pk)

            return json_response(success=True, data=user.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def patch(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            data = self.parse_body(request)

            input_dto = AtualizarUsuarioInputDTO(
                user_id=pk,
                name=data.get('name'),
                email=data.get('email'),
                password=data.get('password'),
                role=data.get('role'),
            )

            atualizar_service = self.get_service('atualizar_usuario_service')
            output = atualizar_service.execute(input_dto)

            logger.info(f"API: Usuário {pk} atualizado")

            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            input_dto = RemoverUsuarioInputDTO(
                id=pk,
                current_user_id=get_user_id(request),
            )

            remover_service = self.get_service('remover_usuario_service')
            output = remover_service.execute(input_dto)

            logger.info(f"API: Usuário {pk} removido")

            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)
