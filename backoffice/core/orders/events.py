"""
Domain Events do Domínio de Pedidos.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from backoffice.core.shared.events import DomainEvent


@dataclass
class PedidoRemovidoEvent(DomainEvent):
    """
    Evento: Pedido foi excluído.

    Attributes:
        order_number: Número do pedido removido
        client_id: Cliente dono do pedido
    """

    order_number: str = ""
    client_id: Optional[str] = None

    @property
    def aggregate_type(self) -> str:
        return "Order"

    def _get_event_data(self) -> Dict[str, Any]:
        return {"order_number": self.order_number, "client_id": self.client_id}
