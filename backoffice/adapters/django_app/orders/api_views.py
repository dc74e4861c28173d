"""
API Views JSON para o domínio de Pedidos.

Endpoints:
- GET /orders/api/ - Listar pedidos (page, take, filter)
- GET /orders/api/numero/<order_number>/ - Obter pedido pelo número
- GET /orders/api/<id>/ - Obter pedido
- DELETE /orders/api/<id>/ - Excluir pedido
"""

import logging

from django.http import HttpRequest, JsonResponse

from backoffice.adapters.django_app.shared.api import (
    BaseAPIView,
    json_response,
    paginated_response,
    parse_pagination,
)

logger = logging.getLogger(__name__)


class OrderAPIListView(BaseAPIView):
    """GET /orders/api/ - Lista pedidos."""

    def get(self, request: HttpRequest) -> JsonResponse:
        """
        Query params:
        - page, take: Paginação
        - filter: Texto buscado no número do pedido ou nome do cliente
        """
        try:
            pagination = parse_pagination(request)
            listar_service = self.get_service('listar_pedidos_service')

            page = listar_service.execute(pagination, request.GET.get('filter', ''))

            return paginated_response(page)

        except Exception as e:
            return self.handle_exception(e)


class OrderAPIDetailView(BaseAPIView):
    """
    GET /orders/api/<id>/ - Obter pedido
    DELETE /orders/api/<id>/ - Excluir pedido
    """

    def get(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            obter_service = self.get_service('obter_pedido_service')
            order = obter_service.execute(pk)

            return json_response(success=True, data=order.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            remover_service = self.get_service('remover_pedido_service')
            output = remover_service.execute(pk)

            logger.info(f"API: Pedido {output.order_number} removido")

            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)


class OrderAPIByNumberView(BaseAPIView):
    """GET /orders/api/numero/<order_number>/"""

    def get(self, request: HttpRequest, order_number: str) -> JsonResponse:
        try:
            obter_service = self.get_service('obter_pedido_por_numero_service')
            order = obter_service.execute(order_number)

            return json_response(success=True, data=order.to_dict())

        except Exception as e:
            return self.handle_exception(e)
