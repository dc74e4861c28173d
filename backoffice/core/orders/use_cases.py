"""
Use Cases do Domínio de Pedidos.

- ObterPedidoService: Obtém pedido por ID
- ObterPedidoPorNumeroService: Obtém pedido pelo número
- ListarPedidosService: Lista pedidos paginados com filtro
- RemoverPedidoService: Exclui pedido
"""

import logging
from typing import Optional

from backoffice.core.shared.dtos import PaginacaoInputDTO, PaginatedResultDTO
from backoffice.core.shared.exceptions import EntityNotFoundError
from backoffice.core.shared.interfaces import UnitOfWork

from .dtos import OrderOutputDTO
from .events import PedidoRemovidoEvent
from .ports import OrderRepository


logger = logging.getLogger(__name__)


class ObterPedidoService:
    """Use Case: Obter detalhes de um pedido."""

    def __init__(self, order_repo: OrderRepository):
        self.order_repo = order_repo

    def execute(self, order_id: str) -> OrderOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se pedido não existe
        """
        order = self.order_repo.get_by_id(order_id)

        if not order:
            raise EntityNotFoundError(
                "Pedido não encontrado.",
                entity_type="Order",
                entity_id=order_id
            )

        return OrderOutputDTO.from_entity(order)


class ObterPedidoPorNumeroService:
    """Use Case: Obter pedido pelo número."""

    def __init__(self, order_repo: OrderRepository):
        self.order_repo = order_repo

    def execute(self, order_number: str) -> OrderOutputDTO:
        order = self.order_repo.get_by_order_number(order_number)

        if not order:
            raise EntityNotFoundError(
                f"Pedido {order_number} não encontrado.",
                entity_type="Order"
            )

        return OrderOutputDTO.from_entity(order)


class ListarPedidosService:
    """
    Use Case: Listar pedidos com paginação.

    O filtro busca no número do pedido ou no nome do cliente.
    """

    def __init__(self, order_repo: OrderRepository):
        self.order_repo = order_repo

    def execute(
        self,
        pagination: Optional[PaginacaoInputDTO] = None,
        filtro: str = "",
    ) -> PaginatedResultDTO[OrderOutputDTO]:
        pagination = pagination or PaginacaoInputDTO()
        page = self.order_repo.list_paginated(pagination, (filtro or "").strip())
        return page.map(OrderOutputDTO.from_entity)


class RemoverPedidoService:
    """Use Case: Excluir pedido."""

    def __init__(self, order_repo: OrderRepository, uow: UnitOfWork):
        self.order_repo = order_repo
        self.uow = uow

    def execute(self, order_id: str) -> OrderOutputDTO:
        """
        Remove o pedido e retorna os dados removidos.

        Raises:
            EntityNotFoundError: Se pedido não existe
        """
        with self.uow:
            order = self.order_repo.get_by_id(order_id)

            if not order:
                raise EntityNotFoundError(
                    "Pedido não encontrado.",
                    entity_type="Order",
                    entity_id=order_id
                )

            self.order_repo.delete(order.id)

            self.uow.publish_event(
                PedidoRemovidoEvent(
                    aggregate_id=order.id,
                    order_number=order.order_number,
                    client_id=order.client_id,
                )
            )

        logger.info(f"Pedido removido: {order.order_number}")
        return OrderOutputDTO.from_entity(order)
