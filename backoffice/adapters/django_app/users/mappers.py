"""
Mapper entre UserEntity (Core) e UserModel (Django).
"""

from backoffice.adapters.django_app.shared.mapping import to_aware
from backoffice.core.users.entities import UserEntity, UserRole

from .models import UserModel


class UserMapper:
    """Mapper para conversão entre UserEntity e UserModel."""

    @staticmethod
    def to_model(entity: UserEntity) -> UserModel:
        return UserModel(
            id=entity.id,
            name=entity.name,
            email=entity.email,
            password_hash=entity.password_hash,
            role=entity.role.value,
            created_at=to_aware(entity.created_at),
            updated_at=to_aware(entity.updated_at),
        )

    @staticmethod
    def to_entity(model: UserModel) -> UserEntity:
        return UserEntity(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            role=UserRole(model.role),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
