"""
Domain Events do Domínio de Usuários.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from backoffice.core.shared.events import DomainEvent


@dataclass
class UsuarioCriadoEvent(DomainEvent):
    """Evento: Usuário foi criado."""

    email: str = ""
    role: str = ""

    @property
    def aggregate_type(self) -> str:
        return "User"

    def _get_event_data(self) -> Dict[str, Any]:
        return {"email": self.email, "role": self.role}


@dataclass
class UsuarioAtualizadoEvent(DomainEvent):
    """
    Evento: Usuário foi alterado.

    A senha aparece em `campos_alterados` apenas pelo nome.
    """

    campos_alterados: List[str] = field(default_factory=list)

    @property
    def aggregate_type(self) -> str:
        return "User"

    def _get_event_data(self) -> Dict[str, Any]:
        return {"campos_alterados": list(self.campos_alterados)}


@dataclass
class UsuarioRemovidoEvent(DomainEvent):
    """Evento: Usuário foi excluído."""

    email: str = ""
    removido_por_id: Optional[str] = None

    @property
    def aggregate_type(self) -> str:
        return "User"

    def _get_event_data(self) -> Dict[str, Any]:
        data = {"email": self.email}
        if self.removido_por_id:
            data["removido_por_id"] = self.removido_por_id
        return data
