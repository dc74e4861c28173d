"""
Testes Unitários para Use Cases do Domínio de Usuários.
"""

import pytest

from backoffice.core.shared.exceptions import (
    BusinessRuleViolationError,
    ConflictError,
    EntityNotFoundError,
    ValidationError,
)
from backoffice.core.shared.interfaces import InMemoryUnitOfWork
from backoffice.core.users.dtos import (
    AtualizarUsuarioInputDTO,
    CriarUsuarioInputDTO,
    RemoverUsuarioInputDTO,
)
from backoffice.core.users.entities import UserRole
from backoffice.core.users.events import UsuarioCriadoEvent, UsuarioRemovidoEvent
from backoffice.core.users.ports import FakeHashProvider, InMemoryUserRepository
from backoffice.core.users.use_cases import (
    AtualizarUsuarioService,
    CriarUsuarioService,
    ListarUsuariosService,
    ObterUsuarioService,
    RemoverUsuarioService,
)


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def hash_provider():
    return FakeHashProvider()


@pytest.fixture
def uow():
    return InMemoryUnitOfWork()


@pytest.fixture
def admin(user_repo, hash_provider):
    service = CriarUsuarioService(user_repo, hash_provider, InMemoryUnitOfWork())
    return service.execute(CriarUsuarioInputDTO(
        name="Admin", email="admin@empresa.com", password="segredo1", role="ADMIN",
    ))


class TestCriarUsuario:

    def test_criar_sucesso(self, user_repo, hash_provider, uow):
        output = CriarUsuarioService(user_repo, hash_provider, uow).execute(
            CriarUsuarioInputDTO(name=" Maria ", email=" Maria@Empresa.com ", password="123456")
        )

        assert output.name == "Maria"
        assert output.email == "maria@empresa.com"
        assert output.role == "USER"
        assert "password_hash" not in output.to_dict()

        persistido = user_repo.get_by_id(output.id)
        assert persistido.password_hash == "hashed:123456"
        assert isinstance(uow.published_events[0], UsuarioCriadoEvent)

    def test_senha_curta(self, user_repo, hash_provider, uow):
        with pytest.raises(ValidationError) as exc_info:
            CriarUsuarioService(user_repo, hash_provider, uow).execute(
                CriarUsuarioInputDTO(name="Maria", email="maria@empresa.com", password="123")
            )

        assert exc_info.value.field == "password"

    def test_email_duplicado(self, user_repo, hash_provider, uow, admin):
        with pytest.raises(ConflictError) as exc_info:
            CriarUsuarioService(user_repo, hash_provider, uow).execute(
                CriarUsuarioInputDTO(name="Outro", email="ADMIN@empresa.com", password="123456")
            )

        assert exc_info.value.message == "E-mail já está em uso."

    def test_papel_invalido(self, user_repo, hash_provider, uow):
        with pytest.raises(ValidationError):
            CriarUsuarioService(user_repo, hash_provider, uow).execute(
                CriarUsuarioInputDTO(name="X", email="x@x.com", password="123456", role="ROOT")
            )


class TestAtualizarUsuario:

    def test_atualiza_campos_informados(self, user_repo, hash_provider, uow, admin):
        output = AtualizarUsuarioService(user_repo, hash_provider, uow).execute(
            AtualizarUsuarioInputDTO(user_id=admin.id, name="Administrador", role="user")
        )

        assert output.name == "Administrador"
        assert output.role == "USER"
        assert output.email == "admin@empresa.com"
        assert uow.published_events[0].campos_alterados == ["name", "role"]

    def test_proprio_email_nao_e_conflito(self, user_repo, hash_provider, uow, admin):
        output = AtualizarUsuarioService(user_repo, hash_provider, uow).execute(
            AtualizarUsuarioInputDTO(user_id=admin.id, email="admin@empresa.com")
        )

        assert output.email == "admin@empresa.com"

    def test_email_de_outro_usuario_conflito(self, user_repo, hash_provider, uow, admin):
        outro = CriarUsuarioService(user_repo, hash_provider, InMemoryUnitOfWork()).execute(
            CriarUsuarioInputDTO(name="Outro", email="outro@empresa.com", password="123456")
        )

        with pytest.raises(ConflictError):
            AtualizarUsuarioService(user_repo, hash_provider, uow).execute(
                AtualizarUsuarioInputDTO(user_id=outro.id, email="admin@empresa.com")
            )

    def test_troca_senha_gera_novo_hash(self, user_repo, hash_provider, uow, admin):
        AtualizarUsuarioService(user_repo, hash_provider, uow).execute(
            AtualizarUsuarioInputDTO(user_id=admin.id, password="nova-senha")
        )

        assert hash_provider.compare_hash("nova-senha", user_repo.get_by_id(admin.id).password_hash)

    def test_usuario_inexistente(self, user_repo, hash_provider, uow):
        with pytest.raises(EntityNotFoundError):
            AtualizarUsuarioService(user_repo, hash_provider, uow).execute(
                AtualizarUsuarioInputDTO(user_id="nao-existe", name="X")
            )


class TestObterEListarUsuarios:

    def test_obter(self, user_repo, admin):
        assert ObterUsuarioService(user_repo).execute(admin.id).role == UserRole.ADMIN.value

    def test_obter_inexistente(self, user_repo):
        with pytest.raises(EntityNotFoundError) as exc_info:
            ObterUsuarioService(user_repo).execute("nao-existe")

        assert exc_info.value.message == "Usuário não encontrado."

    def test_listar_com_filtro(self, user_repo, admin):
        page = ListarUsuariosService(user_repo).execute(filtro="admin")

        assert page.total == 1
        assert page.items[0].email == "admin@empresa.com"


class TestRemoverUsuario:

    def test_remover(self, user_repo, uow, admin):
        output = RemoverUsuarioService(user_repo, uow).execute(
            RemoverUsuarioInputDTO(id=admin.id, current_user_id="outro-id")
        )

        assert output.id == admin.id
        assert user_repo.get_by_id(admin.id) is None
        event = uow.published_events[0]
        assert isinstance(event, UsuarioRemovidoEvent)
        assert event.removido_por_id == "outro-id"

    def test_nao_remove_a_si_mesmo(self, user_repo, admin):
        uow = InMemoryUnitOfWork()

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            RemoverUsuarioService(user_repo, uow).execute(
                RemoverUsuarioInputDTO(id=admin.id, current_user_id=admin.id)
            )

        assert exc_info.value.rule == "auto_remocao_proibida"
        assert uow.committed is False
        assert user_repo.get_by_id(admin.id) is not None

    def test_remover_inexistente(self, user_repo, uow):
        with pytest.raises(EntityNotFoundError):
            RemoverUsuarioService(user_repo, uow).execute(RemoverUsuarioInputDTO(id="nao-existe"))
