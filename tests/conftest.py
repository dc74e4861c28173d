"""
Configurações globais do Pytest para o Backoffice.

Django é configurado pelo pytest-django (DJANGO_SETTINGS_MODULE
no pyproject.toml). Este arquivo fornece fixtures compartilhadas
e a opção --run-integration.
"""

from pathlib import Path

import pytest

from backoffice.config.container import reset_container


@pytest.fixture(scope="session")
def project_root():
    """Retorna o caminho raiz do projeto."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def reset_di_container():
    """
    Reset do container global entre testes.

    Garante que cada teste inicia com singletons limpos.
    """
    reset_container()
    yield
    reset_container()


def pytest_configure(config):
    """Configuração do pytest."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


def pytest_collection_modifyitems(config, items):
    """Pula testes de integração sem --run-integration."""
    if config.getoption("--run-integration", default=False):
        return

    skip_integration = pytest.mark.skip(reason="use --run-integration para executar")

    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


def pytest_addoption(parser):
    """Adiciona opções de linha de comando."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="run integration tests",
    )
