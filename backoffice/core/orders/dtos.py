"""
Data Transfer Objects (DTOs) do Domínio de Pedidos.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .entities import OrderEntity


@dataclass
class OrderOutputDTO:
    """
    DTO de saída com dados do pedido.

    `total_value` é serializado como string para não perder
    precisão decimal no JSON.
    """

    id: str
    order_number: str
    client_id: Optional[str]
    client_name: str
    description: str
    total_value: str
    created_at: datetime

    @classmethod
    def from_entity(cls, entity: OrderEntity) -> "OrderOutputDTO":
        return cls(
            id=entity.id,
            order_number=entity.order_number,
            client_id=entity.client_id,
            client_name=entity.client_name,
            description=entity.description,
            total_value=str(entity.total_value),
            created_at=entity.created_at,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "order_number": self.order_number,
            "client_id": self.client_id,
            "client_name": self.client_name,
            "description": self.description,
            "total_value": self.total_value,
            "created_at": self.created_at.isoformat(),
        }
