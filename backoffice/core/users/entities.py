"""
Entidades do Domínio de Usuários.

Entidades:
- UserEntity: Usuário do backoffice
- UserRole: Papel (ADMIN / USER)
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import ClassVar
import re
import uuid

from backoffice.core.shared.exceptions import ValidationError


_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class UserRole(Enum):
    """Papéis de usuário."""

    ADMIN = "ADMIN"
    USER = "USER"

    @classmethod
    def from_string(cls, value: str) -> "UserRole":
        try:
            return cls[(value or "").strip().upper()]
        except KeyError:
            raise ValidationError(f"Papel inválido: {value}", field="role")


@dataclass
class UserEntity:
    """
    Entidade de Domínio: Usuário.

    O hash da senha nunca sai do domínio: os DTOs de saída
    não o incluem.

    Invariantes:
    - E-mail único entre usuários
    - Senha com pelo menos 6 caracteres (validada antes do hash)
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    name: str = ""
    email: str = ""
    password_hash: str = ""
    role: UserRole = UserRole.USER
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    PASSWORD_MIN_LENGTH: ClassVar[int] = 6

    @classmethod
    def criar(
        cls,
        name: str,
        email: str,
        password_hash: str,
        role: UserRole = UserRole.USER,
    ) -> "UserEntity":
        """
        Factory method para criar usuário com validações.

        Raises:
            ValidationError: Nome ou e-mail inválidos
        """
        cls.validar_nome(name)
        cls.validar_email(email)

        return cls(
            name=name.strip(),
            email=cls.normalizar_email(email),
            password_hash=password_hash,
            role=role,
        )

    @staticmethod
    def normalizar_email(email: str) -> str:
        return email.strip().lower()

    @staticmethod
    def validar_nome(name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Nome é obrigatório", field="name")

    @staticmethod
    def validar_email(email: str) -> None:
        if not email or not _EMAIL_PATTERN.match(email.strip()):
            raise ValidationError("E-mail inválido", field="email")

    @classmethod
    def validar_senha(cls, password: str) -> None:
        if not password or len(password) < cls.PASSWORD_MIN_LENGTH:
            raise ValidationError(
                f"Senha deve ter pelo menos {cls.PASSWORD_MIN_LENGTH} caracteres",
                field="password"
            )

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def touch(self) -> None:
        """Atualiza timestamp de modificação."""
        self.updated_at = datetime.now()

    def __repr__(self) -> str:
        return f"UserEntity(id={self.id[:8]}..., email={self.email}, role={self.role.value})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UserEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
