"""
Entidades do Domínio de Pedidos.

Pedidos são cadastrados pelo painel administrativo; a API expõe
consulta e exclusão.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional
import uuid

from backoffice.core.shared.exceptions import ValidationError


@dataclass
class OrderEntity:
    """
    Entidade de Domínio: Pedido.

    Attributes:
        id: Identificador único (UUID)
        order_number: Número do pedido (único)
        client_id: ID do cliente dono do pedido
        client_name: Nome do cliente (desnormalizado para listagens)
        description: Descrição livre
        total_value: Valor total
        created_at: Data/hora de criação
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    order_number: str = ""
    client_id: Optional[str] = None
    client_name: str = ""
    description: str = ""
    total_value: Decimal = Decimal("0.00")
    created_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def criar(
        cls,
        order_number: str,
        client_id: Optional[str] = None,
        client_name: str = "",
        description: str = "",
        total_value: Decimal = Decimal("0.00"),
    ) -> "OrderEntity":
        """
        Factory method para criar pedido com validações.

        Raises:
            ValidationError: Número ausente ou valor negativo
        """
        if not order_number or not order_number.strip():
            raise ValidationError("Número do pedido é obrigatório", field="order_number")

        valor = Decimal(str(total_value))
        if valor < 0:
            raise ValidationError("Valor total não pode ser negativo", field="total_value")

        return cls(
            order_number=order_number.strip(),
            client_id=client_id,
            client_name=client_name,
            description=description,
            total_value=valor,
        )

    def __repr__(self) -> str:
        return f"OrderEntity(id={self.id[:8]}..., order_number={self.order_number})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
