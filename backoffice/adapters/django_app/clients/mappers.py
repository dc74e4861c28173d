"""
Mappers para conversão entre Entities (Core) e Models (Django).

- ClientMapper: ClientEntity <-> ClientModel
- ClientHistoryMapper: evento serializado -> ClientHistoryModel
"""

from datetime import datetime
from typing import Any, Dict

from backoffice.adapters.django_app.shared.mapping import empty_to_none, to_aware
from backoffice.core.clients.entities import ClientEntity, PersonType

from .models import ClientHistoryModel, ClientModel


class ClientMapper:
    """
    Mapper para conversão entre ClientEntity e ClientModel.
    """

    @staticmethod
    def to_model(entity: ClientEntity) -> ClientModel:
        """
        Converte ClientEntity para ClientModel.

        Note:
            Não chama .save() - deixa isso para o Repository
        """
        return ClientModel(
            id=entity.id,
            name=entity.name,
            person_type=entity.person_type.value,
            cnpj=empty_to_none(entity.cnpj),
            cpf=entity.cpf,
            state_registration=entity.state_registration,
            nfe_email=empty_to_none(entity.nfe_email),
            phone=entity.phone,
            cep=entity.cep,
            address=entity.address,
            address_number=entity.address_number,
            corporate_name=entity.corporate_name,
            fantasy_name=entity.fantasy_name,
            created_at=to_aware(entity.created_at),
            updated_at=to_aware(entity.updated_at),
        )

    @staticmethod
    def to_entity(model: ClientModel) -> ClientEntity:
        """
        Converte ClientModel para ClientEntity.

        Note:
            Bypassa validações do factory method .criar()
            pois dados já foram validados na criação
        """
        return ClientEntity(
            id=model.id,
            name=model.name,
            person_type=PersonType(model.person_type),
            cnpj=model.cnpj,
            cpf=model.cpf,
            state_registration=model.state_registration,
            nfe_email=model.nfe_email,
            phone=model.phone,
            cep=model.cep,
            address=model.address,
            address_number=model.address_number,
            corporate_name=model.corporate_name,
            fantasy_name=model.fantasy_name,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


class ClientHistoryMapper:
    """
    Converte um evento serializado (DomainEvent.to_dict) em
    registro de histórico.

    Recebe o dicionário, não o evento: é o formato que chega
    ao worker Celery.
    """

    @staticmethod
    def to_model(event_data: Dict[str, Any]) -> ClientHistoryModel:
        return ClientHistoryModel(
            client_id=event_data["aggregate_id"],
            event_id=event_data["event_id"],
            event_type=event_data["event_type"],
            event_data=event_data.get("data", {}),
            occurred_at=to_aware(datetime.fromisoformat(event_data["occurred_at"])),
        )
