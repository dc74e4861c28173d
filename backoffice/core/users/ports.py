"""
Ports (Interfaces) do Domínio de Usuários.

- UserRepository: persistência de usuários
- HashProvider: geração e verificação de hash de senha
"""

from dataclasses import replace
from typing import Dict, List, Optional, Protocol, runtime_checkable

from backoffice.core.shared.dtos import PaginacaoInputDTO, PaginatedResultDTO, paginate_list
from backoffice.core.shared.exceptions import ConflictError

from .entities import UserEntity


@runtime_checkable
class UserRepository(Protocol):
    """
    Interface para persistência de Usuários.

    Implementações:
    - DjangoUserRepository (ORM)
    - InMemoryUserRepository (testes)
    """

    def get_by_id(self, user_id: str) -> Optional[UserEntity]:
        ...

    def get_by_email(self, email: str) -> Optional[UserEntity]:
        ...

    def create(self, user: UserEntity) -> UserEntity:
        """
        Raises:
            ConflictError: Se e-mail já existe
        """
        ...

    def update(self, user: UserEntity) -> UserEntity:
        ...

    def delete(self, user_id: str) -> None:
        ...

    def list_paginated(
        self,
        pagination: PaginacaoInputDTO,
        filtro: str = ""
    ) -> PaginatedResultDTO[UserEntity]:
        """Lista usuários paginados; filtro busca em nome ou e-mail."""
        ...


@runtime_checkable
class HashProvider(Protocol):
    """Interface para hash de senhas."""

    def generate_hash(self, payload: str) -> str:
        ...

    def compare_hash(self, payload: str, hashed: str) -> bool:
        ...


class InMemoryUserRepository:
    """Implementação em memória do UserRepository (testes)."""

    def __init__(self):
        self._users: Dict[str, UserEntity] = {}

    def get_by_id(self, user_id: str) -> Optional[UserEntity]:
        user = self._users.get(user_id)
        return replace(user) if user else None

    def get_by_email(self, email: str) -> Optional[UserEntity]:
        for user in self._users.values():
            if user.email == email:
                return replace(user)
        return None

    def create(self, user: UserEntity) -> UserEntity:
        self._check_unique(user)
        self._users[user.id] = replace(user)
        return user

    def update(self, user: UserEntity) -> UserEntity:
        self._check_unique(user)
        self._users[user.id] = replace(user)
        return user

    def delete(self, user_id: str) -> None:
        self._users.pop(user_id, None)

    def list_paginated(
        self,
        pagination: PaginacaoInputDTO,
        filtro: str = ""
    ) -> PaginatedResultDTO[UserEntity]:
        users: List[UserEntity] = sorted(self._users.values(), key=lambda u: u.created_at)
        if filtro:
            termo = filtro.lower()
            users = [u for u in users if termo in u.name.lower() or termo in u.email.lower()]
        return paginate_list([replace(u) for u in users], pagination)

    def _check_unique(self, user: UserEntity) -> None:
        for other in self._users.values():
            if other.id != user.id and other.email == user.email:
                raise ConflictError("E-mail já está em uso.", field="email")

    def clear(self) -> None:
        self._users.clear()


class FakeHashProvider:
    """Hash reversível e previsível, apenas para testes."""

    PREFIX = "hashed:"

    def generate_hash(self, payload: str) -> str:
        return f"{self.PREFIX}{payload}"

    def compare_hash(self, payload: str, hashed: str) -> bool:
        return hashed == self.generate_hash(payload)
