"""
Mapper entre OrderEntity (Core) e OrderModel (Django).
"""

from decimal import Decimal

from backoffice.adapters.django_app.shared.mapping import to_aware
from backoffice.core.orders.entities import OrderEntity

from .models import OrderModel


class OrderMapper:
    """Mapper para conversão entre OrderEntity e OrderModel."""

    @staticmethod
    def to_model(entity: OrderEntity) -> OrderModel:
        return OrderModel(
            id=entity.id,
            order_number=entity.order_number,
            client_id=entity.client_id,
            client_name=entity.client_name or '',
            description=entity.description or '',
            total_value=entity.total_value,
            created_at=to_aware(entity.created_at),
        )

    @staticmethod
    def to_entity(model: OrderModel) -> OrderEntity:
        return OrderEntity(
            id=model.id,
            order_number=model.order_number,
            client_id=model.client_id,
            client_name=model.client_name,
            description=model.description,
            total_value=Decimal(model.total_value),
            created_at=model.created_at,
        )
