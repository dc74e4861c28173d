"""
Use Cases do Domínio de Usuários.

- CriarUsuarioService: Cria usuário com senha em hash
- AtualizarUsuarioService: Altera nome, e-mail, senha ou papel
- ObterUsuarioService: Obtém usuário
- ListarUsuariosService: Lista usuários paginados
- RemoverUsuarioService: Exclui usuário (nunca o próprio solicitante)
"""

import logging
from typing import Optional

from backoffice.core.shared.dtos import PaginacaoInputDTO, PaginatedResultDTO, is_present
from backoffice.core.shared.exceptions import (
    BusinessRuleViolationError,
    ConflictError,
    EntityNotFoundError,
)
from backoffice.core.shared.interfaces import UnitOfWork

from .dtos import (
    AtualizarUsuarioInputDTO,
    CriarUsuarioInputDTO,
    RemoverUsuarioInputDTO,
    UserOutputDTO,
)
from .entities import UserEntity, UserRole
from .events import UsuarioAtualizadoEvent, UsuarioCriadoEvent, UsuarioRemovidoEvent
from .ports import HashProvider, UserRepository


logger = logging.getLogger(__name__)


def _usuario_nao_encontrado(user_id: str) -> EntityNotFoundError:
    return EntityNotFoundError(
        "Usuário não encontrado.",
        entity_type="User",
        entity_id=user_id
    )


class CriarUsuarioService:
    """
    Use Case: Criar usuário.

    Fluxo:
    1. Validar nome, e-mail e senha
    2. Rejeitar e-mail já cadastrado
    3. Gerar hash da senha
    4. Persistir e disparar UsuarioCriado
    """

    def __init__(
        self,
        user_repo: UserRepository,
        hash_provider: HashProvider,
        uow: UnitOfWork,
    ):
        self.user_repo = user_repo
        self.hash_provider = hash_provider
        self.uow = uow

    def execute(self, input_dto: CriarUsuarioInputDTO) -> UserOutputDTO:
        """
        Raises:
            ValidationError: Se dados inválidos
            ConflictError: Se e-mail já está em uso
        """
        with self.uow:
            UserEntity.validar_senha(input_dto.password)
            role = UserRole.from_string(input_dto.role or UserRole.USER.value)

            user = UserEntity.criar(
                name=input_dto.name,
                email=input_dto.email,
                password_hash=self.hash_provider.generate_hash(input_dto.password),
                role=role,
            )

            if self.user_repo.get_by_email(user.email):
                raise ConflictError("E-mail já está em uso.", field="email")

            self.user_repo.create(user)

            self.uow.publish_event(
                UsuarioCriadoEvent(
                    aggregate_id=user.id,
                    email=user.email,
                    role=user.role.value,
                )
            )

        logger.info(f"Usuário criado: {user.id}")
        return UserOutputDTO.from_entity(user)


class AtualizarUsuarioService:
    """
    Use Case: Atualizar usuário.

    A verificação de e-mail ignora o próprio usuário: reenviar o
    e-mail atual não é conflito.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        hash_provider: HashProvider,
        uow: UnitOfWork,
    ):
        self.user_repo = user_repo
        self.hash_provider = hash_provider
        self.uow = uow

    def execute(self, input_dto: AtualizarUsuarioInputDTO) -> UserOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se usuário não existe
            ValidationError: Se dados inválidos
            ConflictError: Se e-mail pertence a outro usuário
        """
        with self.uow:
            user = self.user_repo.get_by_id(input_dto.user_id)

            if not user:
                raise _usuario_nao_encontrado(input_dto.user_id)

            alterados = []

            if is_present(input_dto.name):
                UserEntity.validar_nome(input_dto.name)
                user.name = input_dto.name.strip()
                alterados.append("name")

            if is_present(input_dto.email):
                UserEntity.validar_email(input_dto.email)
                email = UserEntity.normalizar_email(input_dto.email)
                existente = self.user_repo.get_by_email(email)

                if existente and existente.id != user.id:
                    raise ConflictError("E-mail já está em uso.", field="email")

                user.email = email
                alterados.append("email")

            if is_present(input_dto.password):
                UserEntity.validar_senha(input_dto.password)
                user.password_hash = self.hash_provider.generate_hash(input_dto.password)
                alterados.append("password")

            if is_present(input_dto.role):
                user.role = UserRole.from_string(input_dto.role)
                alterados.append("role")

            user.touch()
            self.user_repo.update(user)

            self.uow.publish_event(
                UsuarioAtualizadoEvent(aggregate_id=user.id, campos_alterados=alterados)
            )

        logger.info(f"Usuário atualizado: {user.id}")
        return UserOutputDTO.from_entity(user)


class ObterUsuarioService:
    """Use Case: Obter usuário."""

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    def execute(self, user_id: str) -> UserOutputDTO:
        user = self.user_repo.get_by_id(user_id)

        if not user:
            raise _usuario_nao_encontrado(user_id)

        return UserOutputDTO.from_entity(user)


class ListarUsuariosService:
    """Use Case: Listar usuários com paginação."""

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    def execute(
        self,
        pagination: Optional[PaginacaoInputDTO] = None,
        filtro: str = "",
    ) -> PaginatedResultDTO[UserOutputDTO]:
        pagination = pagination or PaginacaoInputDTO()
        page = self.user_repo.list_paginated(pagination, (filtro or "").strip())
        return page.map(UserOutputDTO.from_entity)


class RemoverUsuarioService:
    """
    Use Case: Excluir usuário.

    Regra: o usuário autenticado não pode excluir a si mesmo.
    """

    def __init__(self, user_repo: UserRepository, uow: UnitOfWork):
        self.user_repo = user_repo
        self.uow = uow

    def execute(self, input_dto: RemoverUsuarioInputDTO) -> UserOutputDTO:
        """
        Raises:
            BusinessRuleViolationError: Se id == current_user_id
            EntityNotFoundError: Se usuário não existe
        """
        if input_dto.current_user_id and input_dto.id == input_dto.current_user_id:
            raise BusinessRuleViolationError(
                "Usuário não pode remover a si mesmo.",
                rule="auto_remocao_proibida"
            )

        with self.uow:
            user = self.user_repo.get_by_id(input_dto.id)

            if not user:
                raise _usuario_nao_encontrado(input_dto.id)

            self.user_repo.delete(user.id)

            self.uow.publish_event(
                UsuarioRemovidoEvent(
                    aggregate_id=user.id,
                    email=user.email,
                    removido_por_id=input_dto.current_user_id,
                )
            )

        logger.info(f"Usuário removido: {user.id}")
        return UserOutputDTO.from_entity(user)
