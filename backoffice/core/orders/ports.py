"""
Ports (Interfaces) do Domínio de Pedidos.
"""

from dataclasses import replace
from typing import Dict, Optional, Protocol, runtime_checkable

from backoffice.core.shared.dtos import PaginacaoInputDTO, PaginatedResultDTO, paginate_list
from backoffice.core.shared.exceptions import ConflictError

from .entities import OrderEntity


@runtime_checkable
class OrderRepository(Protocol):
    """
    Interface para persistência de Pedidos.

    Implementações:
    - DjangoOrderRepository (ORM)
    - InMemoryOrderRepository (testes)
    """

    def get_by_id(self, order_id: str) -> Optional[OrderEntity]:
        ...

    def get_by_order_number(self, order_number: str) -> Optional[OrderEntity]:
        """Busca o primeiro pedido com o número informado."""
        ...

    def create(self, order: OrderEntity) -> OrderEntity:
        """
        Raises:
            ConflictError: Se o número do pedido já existe
        """
        ...

    def delete(self, order_id: str) -> None:
        ...

    def list_paginated(
        self,
        pagination: PaginacaoInputDTO,
        filtro: str = ""
    ) -> PaginatedResultDTO[OrderEntity]:
        """
        Lista pedidos paginados.

        O filtro busca (contém) no número do pedido ou no nome do cliente.
        """
        ...


class InMemoryOrderRepository:
    """Implementação em memória do OrderRepository (testes)."""

    def __init__(self):
        self._orders: Dict[str, OrderEntity] = {}

    def get_by_id(self, order_id: str) -> Optional[OrderEntity]:
        order = self._orders.get(order_id)
        return replace(order) if order else None

    def get_by_order_number(self, order_number: str) -> Optional[OrderEntity]:
        for order in self._orders.values():
            if order.order_number == order_number:
                return replace(order)
        return None

    def create(self, order: OrderEntity) -> OrderEntity:
        if any(o.order_number == order.order_number for o in self._orders.values()):
            raise ConflictError("Número do pedido já está em uso.", field="order_number")
        self._orders[order.id] = replace(order)
        return order

    def delete(self, order_id: str) -> None:
        self._orders.pop(order_id, None)

    def list_paginated(
        self,
        pagination: PaginacaoInputDTO,
        filtro: str = ""
    ) -> PaginatedResultDTO[OrderEntity]:
        orders = sorted(self._orders.values(), key=lambda o: o.created_at)
        if filtro:
            termo = filtro.lower()
            orders = [
                o for o in orders
                if termo in o.order_number.lower() or termo in o.client_name.lower()
            ]
        return paginate_list([replace(o) for o in orders], pagination)

    def clear(self) -> None:
        self._orders.clear()
