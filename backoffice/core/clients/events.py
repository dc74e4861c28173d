"""
Domain Events do Domínio de Clientes.

Eventos:
- ClienteCriadoEvent: Novo cliente cadastrado
- ClienteAtualizadoEvent: Cadastro alterado
- ClienteRemovidoEvent: Cliente excluído

Os três alimentam o histórico de clientes (ClientHistoryModel)
através do handler Celery `record_client_history`.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from backoffice.core.shared.events import DomainEvent


@dataclass
class ClienteCriadoEvent(DomainEvent):
    """
    Evento: Cliente foi cadastrado.

    Attributes:
        name: Nome do cliente
        cnpj: CNPJ normalizado (se informado)
    """

    name: str = ""
    cnpj: Optional[str] = None

    @property
    def aggregate_type(self) -> str:
        return "Client"

    def _get_event_data(self) -> Dict[str, Any]:
        return {"name": self.name, "cnpj": self.cnpj}


@dataclass
class ClienteAtualizadoEvent(DomainEvent):
    """
    Evento: Cadastro do cliente foi alterado.

    Attributes:
        campos_alterados: Nomes dos campos sobrescritos na atualização
    """

    campos_alterados: List[str] = field(default_factory=list)

    @property
    def aggregate_type(self) -> str:
        return "Client"

    def _get_event_data(self) -> Dict[str, Any]:
        return {"campos_alterados": list(self.campos_alterados)}


@dataclass
class ClienteRemovidoEvent(DomainEvent):
    """Evento: Cliente foi excluído."""

    name: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Client"

    def _get_event_data(self) -> Dict[str, Any]:
        return {"name": self.name}
