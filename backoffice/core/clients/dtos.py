"""
Data Transfer Objects (DTOs) do Domínio de Clientes.

Tipos de DTOs:
- Input DTOs: dados de entrada vindos da API
- Output DTOs: dados formatados para resposta
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .entities import ClientEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CriarClienteInputDTO:
    """
    DTO de entrada para criar cliente.

    Attributes:
        name: Nome do cliente (obrigatório)
        person_type: "LEGAL" ou "PHYSICAL"
        cnpj: CNPJ em qualquer formato
        cpf: CPF (pessoa física)
        nfe_email: E-mail da nota fiscal
        cep: CEP, resolvido para endereço
        address_number: Número do endereço
        corporate_name: Razão social
        fantasy_name: Nome fantasia
        phone: Telefone
        state_registration: Inscrição estadual
    """

    name: str
    person_type: str = "LEGAL"
    cnpj: Optional[str] = None
    cpf: Optional[str] = None
    nfe_email: Optional[str] = None
    cep: Optional[str] = None
    address_number: Optional[str] = None
    corporate_name: Optional[str] = None
    fantasy_name: Optional[str] = None
    phone: Optional[str] = None
    state_registration: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "person_type": self.person_type,
            "cnpj": self.cnpj,
            "cpf": self.cpf,
            "nfe_email": self.nfe_email,
            "cep": self.cep,
            "address_number": self.address_number,
            "corporate_name": self.corporate_name,
            "fantasy_name": self.fantasy_name,
            "phone": self.phone,
            "state_registration": self.state_registration,
        }


@dataclass(frozen=True)
class AtualizarClienteInputDTO:
    """
    DTO de entrada para atualizar cliente.

    Todos os campos, exceto `client_id`, são opcionais. None ou
    string vazia significam "não alterar".

    Attributes:
        client_id: ID do cliente a atualizar
        cnpj: Novo CNPJ (normalizado antes de gravar)
        cep: Novo CEP (endereço é recalculado)
        nfe_email: Novo e-mail da nota fiscal
        address_number, corporate_name, fantasy_name, name, phone,
        state_registration: Sobrescritos quando informados
    """

    client_id: str
    cnpj: Optional[str] = None
    cep: Optional[str] = None
    nfe_email: Optional[str] = None
    address_number: Optional[str] = None
    corporate_name: Optional[str] = None
    fantasy_name: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    state_registration: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "client_id": self.client_id,
            "cnpj": self.cnpj,
            "cep": self.cep,
            "nfe_email": self.nfe_email,
            "address_number": self.address_number,
            "corporate_name": self.corporate_name,
            "fantasy_name": self.fantasy_name,
            "name": self.name,
            "phone": self.phone,
            "state_registration": self.state_registration,
        }


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class ClientOutputDTO:
    """DTO de saída completo com dados do cliente."""

    id: str
    name: str
    person_type: str
    cnpj: Optional[str]
    cpf: Optional[str]
    nfe_email: Optional[str]
    cep: Optional[str]
    address: Optional[str]
    address_number: Optional[str]
    corporate_name: Optional[str]
    fantasy_name: Optional[str]
    phone: Optional[str]
    state_registration: Optional[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, entity: ClientEntity) -> "ClientOutputDTO":
        return cls(
            id=entity.id,
            name=entity.name,
            person_type=entity.person_type.value,
            cnpj=entity.cnpj,
            cpf=entity.cpf,
            nfe_email=entity.nfe_email,
            cep=entity.cep,
            address=entity.address,
            address_number=entity.address_number,
            corporate_name=entity.corporate_name,
            fantasy_name=entity.fantasy_name,
            phone=entity.phone,
            state_registration=entity.state_registration,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "name": self.name,
            "person_type": self.person_type,
            "cnpj": self.cnpj,
            "cpf": self.cpf,
            "nfe_email": self.nfe_email,
            "cep": self.cep,
            "address": self.address,
            "address_number": self.address_number,
            "corporate_name": self.corporate_name,
            "fantasy_name": self.fantasy_name,
            "phone": self.phone,
            "state_registration": self.state_registration,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


@dataclass
class ClientListItemDTO:
    """
    DTO otimizado para listagens de clientes.

    Contém apenas campos necessários para exibição em lista.
    """

    id: str
    name: str
    cnpj: Optional[str]
    fantasy_name: Optional[str]
    nfe_email: Optional[str]
    phone: Optional[str]

    @classmethod
    def from_entity(cls, entity: ClientEntity) -> "ClientListItemDTO":
        return cls(
            id=entity.id,
            name=entity.name,
            cnpj=entity.cnpj,
            fantasy_name=entity.fantasy_name,
            nfe_email=entity.nfe_email,
            phone=entity.phone,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "cnpj": self.cnpj,
            "fantasy_name": self.fantasy_name,
            "nfe_email": self.nfe_email,
            "phone": self.phone,
        }
