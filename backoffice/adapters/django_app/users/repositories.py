"""
Repositório Django de Usuários.
"""

from typing import Optional

from backoffice.adapters.django_app.shared.repository import BaseRepository
from backoffice.core.users.entities import UserEntity

from .mappers import UserMapper
from .models import UserModel


class DjangoUserRepository(BaseRepository[UserEntity, UserModel]):
    """Implementação Django do UserRepository."""

    model_class = UserModel
    search_fields = ["name", "email"]
    unique_fields = {"email": "E-mail já está em uso."}
    default_order_field = "created_at"

    def to_entity(self, model: UserModel) -> UserEntity:
        return UserMapper.to_entity(model)

    def to_model(self, entity: UserEntity) -> UserModel:
        return UserMapper.to_model(entity)

    def get_by_email(self, email: str) -> Optional[UserEntity]:
        return self._get_by(email=email)
