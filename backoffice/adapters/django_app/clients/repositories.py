"""
Repositório Django de Clientes.

Implementa o port ClientRepository sobre o ORM.
"""

from typing import Optional

from backoffice.adapters.django_app.shared.repository import BaseRepository
from backoffice.core.clients.entities import ClientEntity

from .mappers import ClientMapper
from .models import ClientModel


class DjangoClientRepository(BaseRepository[ClientEntity, ClientModel]):
    """
    Implementação Django do ClientRepository.

    Violações das restrições únicas de cnpj e nfe_email viram
    ConflictError com a mesma mensagem dos use cases.

    Example:
        repo = DjangoClientRepository()
        client = repo.get_by_cnpj("12 345 678/0001-95")
    """

    model_class = ClientModel
    search_fields = ["name", "corporate_name", "fantasy_name", "cnpj"]
    unique_fields = {
        "cnpj": "CNPJ já está em uso.",
        "nfe_email": "E-mail da nota fiscal já usado.",
    }
    default_order_field = "created_at"

    def to_entity(self, model: ClientModel) -> ClientEntity:
        return ClientMapper.to_entity(model)

    def to_model(self, entity: ClientEntity) -> ClientModel:
        return ClientMapper.to_model(entity)

    def get_by_cnpj(self, cnpj: str) -> Optional[ClientEntity]:
        return self._get_by(cnpj=cnpj)

    def get_by_nfe_email(self, nfe_email: str) -> Optional[ClientEntity]:
        return self._get_by(nfe_email=nfe_email)

