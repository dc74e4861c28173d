"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio
- Interfaces (Ports)
- Base classes para Domain Events
- DTOs de paginação
"""

from .exceptions import (
    DomainException,
    ValidationError,
    EntityNotFoundError,
    BusinessRuleViolationError,
    ConflictError,
    UpstreamServiceError,
)
from .events import DomainEvent
from .interfaces import UnitOfWork, InMemoryUnitOfWork, EventPublisher
from .dtos import PaginacaoInputDTO, PaginatedResultDTO, is_present

__all__ = [
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "BusinessRuleViolationError",
    "ConflictError",
    "UpstreamServiceError",
    "DomainEvent",
    "UnitOfWork",
    "InMemoryUnitOfWork",
    "EventPublisher",
    "PaginacaoInputDTO",
    "PaginatedResultDTO",
    "is_present",
]
