"""
Domínio de Clientes.

- Entidades (ClientEntity, PersonType)
- Normalização de CNPJ
- Use Cases (Criar, Atualizar, Obter, Listar, Remover)
- Domain Events (ClienteCriado, ClienteAtualizado, ClienteRemovido)
- Ports (ClientRepository, CEPQueryProvider)

A atualização de cadastro (AtualizarClienteService) concentra as
regras do domínio: mescla condicional de campos, consulta de CEP e
verificações de unicidade de CNPJ e e-mail da nota fiscal.
"""

from .entities import ClientEntity, PersonType
from .cnpj import normalize_cnpj
from .events import ClienteCriadoEvent, ClienteAtualizadoEvent, ClienteRemovidoEvent
from .dtos import (
    CriarClienteInputDTO,
    AtualizarClienteInputDTO,
    ClientOutputDTO,
    ClientListItemDTO,
)
from .ports import AddressInfo, ClientRepository, CEPQueryProvider
from .use_cases import (
    CriarClienteService,
    AtualizarClienteService,
    ObterClienteService,
    ListarClientesService,
    RemoverClienteService,
)

__all__ = [
    # Entities
    "ClientEntity",
    "PersonType",
    "normalize_cnpj",
    # Events
    "ClienteCriadoEvent",
    "ClienteAtualizadoEvent",
    "ClienteRemovidoEvent",
    # DTOs
    "CriarClienteInputDTO",
    "AtualizarClienteInputDTO",
    "ClientOutputDTO",
    "ClientListItemDTO",
    # Ports
    "AddressInfo",
    "ClientRepository",
    "CEPQueryProvider",
    # Use Cases
    "CriarClienteService",
    "AtualizarClienteService",
    "ObterClienteService",
    "ListarClientesService",
    "RemoverClienteService",
]
