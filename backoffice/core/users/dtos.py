"""
Data Transfer Objects (DTOs) do Domínio de Usuários.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .entities import UserEntity


@dataclass(frozen=True)
class CriarUsuarioInputDTO:
    """
    DTO de entrada para criar usuário.

    Attributes:
        name: Nome
        email: E-mail (único)
        password: Senha em texto puro (hash feito no use case)
        role: "ADMIN" ou "USER"
    """

    name: str
    email: str
    password: str
    role: str = "USER"

    def to_dict(self) -> dict:
        # Senha nunca é serializada
        return {"name": self.name, "email": self.email, "role": self.role}


@dataclass(frozen=True)
class AtualizarUsuarioInputDTO:
    """
    DTO de entrada para atualizar usuário.

    None ou string vazia significam "não alterar".
    """

    user_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "name": self.name,
            "email": self.email,
            "role": self.role,
        }


@dataclass(frozen=True)
class RemoverUsuarioInputDTO:
    """
    DTO de entrada para excluir usuário.

    Attributes:
        id: Usuário a excluir
        current_user_id: Usuário autenticado que pede a exclusão
    """

    id: str
    current_user_id: Optional[str] = None


@dataclass
class UserOutputDTO:
    """DTO de saída do usuário (sem hash de senha)."""

    id: str
    name: str
    email: str
    role: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, entity: UserEntity) -> "UserOutputDTO":
        return cls(
            id=entity.id,
            name=entity.name,
            email=entity.email,
            role=entity.role.value,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
