"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção explícita.

Padrões:
- Singleton: Uma instância para toda app (repositories, providers)
- Factory: Nova instância por chamada (services, UoW)
- Configuration: valores vindos do Django settings

Adapters Django são importados apenas na primeira resolução,
depois que os apps estão carregados.
"""

from importlib import import_module
from typing import Callable, Optional

from dependency_injector import containers, providers

from backoffice.adapters.django_app.events.publishers import get_event_publisher
from backoffice.adapters.providers.viacep import ViaCEPQueryProvider
from backoffice.core.clients.ports import FakeCEPQueryProvider, InMemoryClientRepository
from backoffice.core.clients.use_cases import (
    AtualizarClienteService,
    CriarClienteService,
    ListarClientesService,
    ObterClienteService,
    RemoverClienteService,
)
from backoffice.core.orders.ports import InMemoryOrderRepository
from backoffice.core.orders.use_cases import (
    ListarPedidosService,
    ObterPedidoPorNumeroService,
    ObterPedidoService,
    RemoverPedidoService,
)
from backoffice.core.shared.interfaces import InMemoryUnitOfWork
from backoffice.core.users.ports import FakeHashProvider, InMemoryUserRepository
from backoffice.core.users.use_cases import (
    AtualizarUsuarioService,
    CriarUsuarioService,
    ListarUsuariosService,
    ObterUsuarioService,
    RemoverUsuarioService,
)


def lazy(path: str) -> Callable:
    """
    Callable que importa `pacote.modulo.Classe` só quando chamado.

    Example:
        providers.Singleton(lazy("backoffice.adapters.django_app.clients.repositories.DjangoClientRepository"))
    """
    module_name, attr = path.rsplit(".", 1)

    def factory(*args, **kwargs):
        return getattr(import_module(module_name), attr)(*args, **kwargs)

    factory.__name__ = attr
    return factory


DEFAULT_CONFIG = {
    "viacep_base_url": "https://viacep.com.br/ws",
    "viacep_timeout": 10.0,
    "event_publisher_mode": "sync",
}


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: Variáveis de ambiente/settings
    - Infrastructure: Publisher de eventos, provedores externos
    - Repositories: Persistência
    - Unit of Work: Transações
    - Services: Use Cases

    Example:
        container = get_container()
        service = container.atualizar_cliente_service()
        result = service.execute(input_dto)
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration(default=DEFAULT_CONFIG)

    # =========================================================================
    # Infrastructure
    # =========================================================================

    event_publisher = providers.Singleton(
        get_event_publisher,
        mode=config.event_publisher_mode,
    )

    cep_provider = providers.Singleton(
        ViaCEPQueryProvider,
        base_url=config.viacep_base_url,
        timeout=config.viacep_timeout,
    )

    hash_provider = providers.Singleton(
        lazy("backoffice.adapters.providers.hashing.DjangoHashProvider")
    )

    # =========================================================================
    # Repositories (Singleton - stateless)
    # =========================================================================

    client_repository = providers.Singleton(
        lazy("backoffice.adapters.django_app.clients.repositories.DjangoClientRepository")
    )

    order_repository = providers.Singleton(
        lazy("backoffice.adapters.django_app.orders.repositories.DjangoOrderRepository")
    )

    user_repository = providers.Singleton(
        lazy("backoffice.adapters.django_app.users.repositories.DjangoUserRepository")
    )

    # =========================================================================
    # Unit of Work (Factory - nova instância por operação)
    # =========================================================================

    unit_of_work = providers.Factory(
        lazy("backoffice.adapters.django_app.shared.unit_of_work.DjangoUnitOfWork"),
        event_publisher=event_publisher,
    )

    # =========================================================================
    # Services - Clientes
    # =========================================================================

    criar_cliente_service = providers.Factory(
        CriarClienteService,
        client_repo=client_repository,
        cep_provider=cep_provider,
        uow=unit_of_work,
    )

    atualizar_cliente_service = providers.Factory(
        AtualizarClienteService,
        client_repo=client_repository,
        cep_provider=cep_provider,
        uow=unit_of_work,
    )

    obter_cliente_service = providers.Factory(
        ObterClienteService,
        client_repo=client_repository,
    )

    listar_clientes_service = providers.Factory(
        ListarClientesService,
        client_repo=client_repository,
    )

    remover_cliente_service = providers.Factory(
        RemoverClienteService,
        client_repo=client_repository,
        uow=unit_of_work,
    )

    # =========================================================================
    # Services - Pedidos
    # =========================================================================

    obter_pedido_service = providers.Factory(
        ObterPedidoService,
        order_repo=order_repository,
    )

    obter_pedido_por_numero_service = providers.Factory(
        ObterPedidoPorNumeroService,
        order_repo=order_repository,
    )

    listar_pedidos_service = providers.Factory(
        ListarPedidosService,
        order_repo=order_repository,
    )

    remover_pedido_service = providers.Factory(
        RemoverPedidoService,
        order_repo=order_repository,
        uow=unit_of_work,
    )

    # =========================================================================
    # Services - Usuários
    # =========================================================================

    criar_usuario_service = providers.Factory(
        CriarUsuarioService,
        user_repo=user_repository,
        hash_provider=hash_provider,
        uow=unit_of_work,
    )

    atualizar_usuario_service = providers.Factory(
        AtualizarUsuarioService,
        user_repo=user_repository,
        hash_provider=hash_provider,
        uow=unit_of_work,
    )

    obter_usuario_service = providers.Factory(
        ObterUsuarioService,
        user_repo=user_repository,
    )

    listar_usuarios_service = providers.Factory(
        ListarUsuariosService,
        user_repo=user_repository,
    )

    remover_usuario_service = providers.Factory(
        RemoverUsuarioService,
        user_repo=user_repository,
        uow=unit_of_work,
    )


# =============================================================================
# Testing Container
# =============================================================================

class TestingContainer(containers.DeclarativeContainer):
    """
    Infraestrutura em memória para testes.

    Sobrescreve, por nome, os providers de infraestrutura do
    Container; os services continuam os mesmos.

    Example:
        container = get_testing_container()
        container.client_repository().create(client)
    """

    __test__ = False  # não é classe de teste do pytest

    event_publisher = providers.Singleton(
        lazy("backoffice.adapters.django_app.events.publishers.InMemoryEventPublisher")
    )

    cep_provider = providers.Singleton(FakeCEPQueryProvider)

    hash_provider = providers.Singleton(FakeHashProvider)

    client_repository = providers.Singleton(InMemoryClientRepository)

    order_repository = providers.Singleton(InMemoryOrderRepository)

    user_repository = providers.Singleton(InMemoryUserRepository)

    unit_of_work = providers.Factory(InMemoryUnitOfWork)


def get_testing_container() -> Container:
    """Container com os services ligados às implementações em memória."""
    container = Container()
    container.override(TestingContainer())
    return container


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir, lendo VIACEP_* e EVENT_PUBLISHER_MODE
    do Django settings.
    """
    global _container

    if _container is None:
        from django.conf import settings

        _container = Container()
        _container.config.from_dict({
            "viacep_base_url": getattr(settings, "VIACEP_BASE_URL", DEFAULT_CONFIG["viacep_base_url"]),
            "viacep_timeout": getattr(settings, "VIACEP_TIMEOUT", DEFAULT_CONFIG["viacep_timeout"]),
            "event_publisher_mode": getattr(
                settings, "EVENT_PUBLISHER_MODE", DEFAULT_CONFIG["event_publisher_mode"]
            ),
        })

    return _container


def reset_container() -> None:
    """
    Reset do container (para testes).
    """
    global _container
    _container = None
