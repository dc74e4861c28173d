"""
Domínio de Pedidos.

Consulta (por ID, por número, listagem paginada) e exclusão de pedidos.
"""

from .entities import OrderEntity
from .events import PedidoRemovidoEvent
from .dtos import OrderOutputDTO
from .ports import OrderRepository
from .use_cases import (
    ObterPedidoService,
    ObterPedidoPorNumeroService,
    ListarPedidosService,
    RemoverPedidoService,
)

__all__ = [
    "OrderEntity",
    "PedidoRemovidoEvent",
    "OrderOutputDTO",
    "OrderRepository",
    "ObterPedidoService",
    "ObterPedidoPorNumeroService",
    "ListarPedidosService",
    "RemoverPedidoService",
]
