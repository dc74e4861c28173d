"""
DTOs compartilhados entre os domínios.

- PaginacaoInputDTO / PaginatedResultDTO: listagens paginadas
- is_present: regra de presença dos campos opcionais de atualização

A paginação segue o modelo page/take: a página 1 começa no
registro 0 e as demais em `page * take - take`.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, List, TypeVar

from .exceptions import ValidationError


T = TypeVar("T")


def is_present(value: Any) -> bool:
    """
    Indica se um campo opcional de atualização foi informado.

    None e string vazia significam "não alterar".
    """
    return value is not None and value != ""

DEFAULT_PAGE = 1
DEFAULT_TAKE = 5
MAX_TAKE = 100


@dataclass(frozen=True)
class PaginacaoInputDTO:
    """
    Parâmetros de paginação.

    Attributes:
        page: Número da página (1-indexed)
        take: Itens por página (1 a 100)

    Raises:
        ValidationError: Se page < 1 ou take fora do intervalo
    """

    page: int = DEFAULT_PAGE
    take: int = DEFAULT_TAKE

    def __post_init__(self):
        if self.page < 1:
            raise ValidationError("Página deve ser maior ou igual a 1", field="page")
        if not 1 <= self.take <= MAX_TAKE:
            raise ValidationError(
                f"Itens por página deve estar entre 1 e {MAX_TAKE}",
                field="take"
            )

    @property
    def skip(self) -> int:
        """Quantidade de registros a pular antes da página atual."""
        return 0 if self.page == 1 else self.page * self.take - self.take

    def to_dict(self) -> dict:
        return {"page": self.page, "take": self.take}


@dataclass
class PaginatedResultDTO(Generic[T]):
    """
    DTO para resultados paginados.

    Attributes:
        items: Lista de itens da página atual
        total: Total de itens (sem paginação)
        pagina: Página atual
        por_pagina: Itens por página
    """

    items: List[T] = field(default_factory=list)
    total: int = 0
    pagina: int = DEFAULT_PAGE
    por_pagina: int = DEFAULT_TAKE

    @property
    def total_paginas(self) -> int:
        """Calcula total de páginas."""
        if self.por_pagina <= 0:
            return 0
        return (self.total + self.por_pagina - 1) // self.por_pagina

    @property
    def tem_proxima(self) -> bool:
        """Verifica se há próxima página."""
        return self.pagina < self.total_paginas

    @property
    def tem_anterior(self) -> bool:
        """Verifica se há página anterior."""
        return self.pagina > 1

    def map(self, func) -> "PaginatedResultDTO":
        """Aplica `func` a cada item mantendo os metadados da página."""
        return PaginatedResultDTO(
            items=[func(item) for item in self.items],
            total=self.total,
            pagina=self.pagina,
            por_pagina=self.por_pagina,
        )

    def to_dict(self) -> dict:
        return {
            "items": [_item_to_dict(item) for item in self.items],
            "total": self.total,
            "pagina": self.pagina,
            "por_pagina": self.por_pagina,
            "total_paginas": self.total_paginas,
            "tem_proxima": self.tem_proxima,
            "tem_anterior": self.tem_anterior,
        }


def _item_to_dict(item: Any) -> Any:
    return item.to_dict() if hasattr(item, "to_dict") else item


def paginate_list(items: List[T], pagination: PaginacaoInputDTO) -> PaginatedResultDTO[T]:
    """
    Pagina uma lista já carregada em memória.

    Usado pelos repositórios em memória.
    """
    start = pagination.skip
    return PaginatedResultDTO(
        items=items[start:start + pagination.take],
        total=len(items),
        pagina=pagination.page,
        por_pagina=pagination.take,
    )
