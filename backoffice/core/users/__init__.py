"""
Domínio de Usuários.

CRUD de usuários do backoffice com senha em hash (HashProvider)
e papéis ADMIN / USER.
"""

from .entities import UserEntity, UserRole
from .events import UsuarioCriadoEvent, UsuarioAtualizadoEvent, UsuarioRemovidoEvent
from .dtos import (
    CriarUsuarioInputDTO,
    AtualizarUsuarioInputDTO,
    RemoverUsuarioInputDTO,
    UserOutputDTO,
)
from .ports import UserRepository, HashProvider
from .use_cases import (
    CriarUsuarioService,
    AtualizarUsuarioService,
    ObterUsuarioService,
    ListarUsuariosService,
    RemoverUsuarioService,
)

__all__ = [
    "UserEntity",
    "UserRole",
    "UsuarioCriadoEvent",
    "UsuarioAtualizadoEvent",
    "UsuarioRemovidoEvent",
    "CriarUsuarioInputDTO",
    "AtualizarUsuarioInputDTO",
    "RemoverUsuarioInputDTO",
    "UserOutputDTO",
    "UserRepository",
    "HashProvider",
    "CriarUsuarioService",
    "AtualizarUsuarioService",
    "ObterUsuarioService",
    "ListarUsuariosService",
    "RemoverUsuarioService",
]
