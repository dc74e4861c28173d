"""
Repositório Django de Pedidos.
"""

from typing import Optional

from backoffice.adapters.django_app.shared.repository import BaseRepository
from backoffice.core.orders.entities import OrderEntity

from .mappers import OrderMapper
from .models import OrderModel


class DjangoOrderRepository(BaseRepository[OrderEntity, OrderModel]):
    """
    Implementação Django do OrderRepository.

    O filtro textual busca no número do pedido e no nome do cliente.
    """

    model_class = OrderModel
    search_fields = ["order_number", "client_name"]
    unique_fields = {"order_number": "Número do pedido já está em uso."}
    default_order_field = "created_at"

    def to_entity(self, model: OrderModel) -> OrderEntity:
        return OrderMapper.to_entity(model)

    def to_model(self, entity: OrderEntity) -> OrderModel:
        return OrderMapper.to_model(entity)

    def get_by_order_number(self, order_number: str) -> Optional[OrderEntity]:
        return self._get_by(order_number=order_number)
