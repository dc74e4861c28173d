"""
Use Cases (Application Services) do Domínio de Clientes.

Use Cases implementados:
- CriarClienteService: Cadastra novo cliente
- AtualizarClienteService: Reconciliação de atualização de cadastro
- ObterClienteService: Obtém cliente específico
- ListarClientesService: Lista clientes paginados com filtro
- RemoverClienteService: Exclui cliente

Princípios:
- Um Use Case = Uma operação de negócio
- Dependências injetadas (DI)
- Exceções de colaboradores propagam sem tratamento
"""

import logging
from typing import Optional

from backoffice.core.shared.dtos import PaginacaoInputDTO, PaginatedResultDTO, is_present
from backoffice.core.shared.exceptions import ConflictError, EntityNotFoundError
from backoffice.core.shared.interfaces import UnitOfWork

from .cnpj import normalize_cnpj
from .dtos import (
    AtualizarClienteInputDTO,
    ClientListItemDTO,
    ClientOutputDTO,
    CriarClienteInputDTO,
)
from .entities import ClientEntity, PersonType
from .events import ClienteAtualizadoEvent, ClienteCriadoEvent, ClienteRemovidoEvent
from .ports import CEPQueryProvider, ClientRepository


logger = logging.getLogger(__name__)

# Campos sobrescritos diretamente quando presentes na atualização
CAMPOS_SIMPLES = (
    "address_number",
    "corporate_name",
    "fantasy_name",
    "name",
    "phone",
    "state_registration",
)


def _cliente_nao_encontrado(client_id: str) -> EntityNotFoundError:
    return EntityNotFoundError(
        "Cliente não encontrado.",
        entity_type="Client",
        entity_id=client_id
    )


class CriarClienteService:
    """
    Use Case: Cadastrar um novo cliente.

    Fluxo:
    1. Validar dados e normalizar CNPJ (na entidade)
    2. Rejeitar CNPJ ou e-mail da NFe já cadastrados
    3. Resolver endereço pelo CEP, se informado
    4. Persistir e disparar ClienteCriado
    """

    def __init__(
        self,
        client_repo: ClientRepository,
        cep_provider: CEPQueryProvider,
        uow: UnitOfWork,
    ):
        self.client_repo = client_repo
        self.cep_provider = cep_provider
        self.uow = uow

    def execute(self, input_dto: CriarClienteInputDTO) -> ClientOutputDTO:
        """
        Executa cadastro de cliente em transação atômica.

        Raises:
            ValidationError: Se dados inválidos
            ConflictError: Se CNPJ ou e-mail da NFe já estão em uso
            UpstreamServiceError: Se a consulta de CEP falhar
        """
        with self.uow:
            client = ClientEntity.criar(
                name=input_dto.name,
                person_type=PersonType.from_string(input_dto.person_type),
                cnpj=input_dto.cnpj,
                nfe_email=input_dto.nfe_email,
                cpf=input_dto.cpf or None,
                address_number=input_dto.address_number or None,
                corporate_name=input_dto.corporate_name or None,
                fantasy_name=input_dto.fantasy_name or None,
                phone=input_dto.phone or None,
                state_registration=input_dto.state_registration or None,
            )

            if client.cnpj and self.client_repo.get_by_cnpj(client.cnpj):
                raise ConflictError("CNPJ já está em uso.", field="cnpj")

            if client.nfe_email and self.client_repo.get_by_nfe_email(client.nfe_email):
                raise ConflictError("E-mail da nota fiscal já usado.", field="nfe_email")

            if is_present(input_dto.cep):
                info = self.cep_provider.get_cep_info(input_dto.cep)
                client.cep = input_dto.cep
                client.address = self.cep_provider.build_address(info)

            self.client_repo.create(client)

            self.uow.publish_event(
                ClienteCriadoEvent(
                    aggregate_id=client.id,
                    name=client.name,
                    cnpj=client.cnpj,
                )
            )

        logger.info(f"Cliente criado: {client.id}")
        return ClientOutputDTO.from_entity(client)


class AtualizarClienteService:
    """
    Use Case: Atualizar cadastro de cliente.

    Fluxo:
    1. Buscar cliente (EntityNotFoundError se ausente)
    2. CNPJ presente: normalizar, rejeitar se pertence a outro cliente
    3. CEP presente: consultar provedor e recalcular endereço
    4. E-mail da NFe presente: rejeitar se qualquer cliente já o usa,
       inclusive o próprio
    5. Sobrescrever os campos simples presentes
    6. Persistir o registro inteiro
    7. Retornar o cliente alterado em memória (sem nova leitura)

    None e string vazia significam "não alterar". Nenhuma exceção
    de colaborador é capturada: falhas do provedor de CEP chegam
    intactas ao chamador e a transação é desfeita.

    Example:
        service = AtualizarClienteService(client_repo, cep_provider, uow)
        output = service.execute(
            AtualizarClienteInputDTO(client_id=client.id, cnpj="12345678000195")
        )
        output.cnpj  # "12 345 678/0001-95"
    """

    def __init__(
        self,
        client_repo: ClientRepository,
        cep_provider: CEPQueryProvider,
        uow: UnitOfWork,
    ):
        self.client_repo = client_repo
        self.cep_provider = cep_provider
        self.uow = uow

    def execute(self, input_dto: AtualizarClienteInputDTO) -> ClientOutputDTO:
        """
        Executa a atualização em transação atômica.

        Raises:
            ValidationError: E-mail da NFe ou nome inválidos
            EntityNotFoundError: Se cliente não existe
            ConflictError: CNPJ de outro cliente ou e-mail da NFe já usado
            UpstreamServiceError: Se a consulta de CEP falhar
        """
        with self.uow:
            client = self.client_repo.get_by_id(input_dto.client_id)

            if not client:
                raise _cliente_nao_encontrado(input_dto.client_id)

            alteracoes = {}

            if is_present(input_dto.cnpj):
                cnpj = normalize_cnpj(input_dto.cnpj)
                existente = self.client_repo.get_by_cnpj(cnpj)

                if existente and existente.id != client.id:
                    raise ConflictError("CNPJ já está em uso.", field="cnpj")

                alteracoes["cnpj"] = cnpj

            if is_present(input_dto.cep):
                info = self.cep_provider.get_cep_info(input_dto.cep)
                alteracoes["cep"] = input_dto.cep
                alteracoes["address"] = self.cep_provider.build_address(info)

            if is_present(input_dto.nfe_email):
                ClientEntity.validar_email(input_dto.nfe_email)

                if self.client_repo.get_by_nfe_email(input_dto.nfe_email):
                    raise ConflictError(
                        "E-mail da nota fiscal já usado.",
                        field="nfe_email"
                    )

                alteracoes["nfe_email"] = input_dto.nfe_email

            if is_present(input_dto.name):
                ClientEntity.validar_nome(input_dto.name)

            for campo in CAMPOS_SIMPLES:
                valor = getattr(input_dto, campo)
                if is_present(valor):
                    alteracoes[campo] = valor

            client.atualizar_campos(alteracoes)
            self.client_repo.update(client)

            self.uow.publish_event(
                ClienteAtualizadoEvent(
                    aggregate_id=client.id,
                    campos_alterados=list(alteracoes),
                )
            )

        logger.info(f"Cliente atualizado: {client.id} ({', '.join(alteracoes) or 'sem alterações'})")
        return ClientOutputDTO.from_entity(client)


class ObterClienteService:
    """
    Use Case: Obter detalhes de um cliente.
    """

    def __init__(self, client_repo: ClientRepository):
        self.client_repo = client_repo

    def execute(self, client_id: str) -> ClientOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se cliente não existe
        """
        client = self.client_repo.get_by_id(client_id)

        if not client:
            raise _cliente_nao_encontrado(client_id)

        return ClientOutputDTO.from_entity(client)


class ListarClientesService:
    """
    Use Case: Listar clientes com paginação.

    Não usa UoW pois é operação de leitura.
    """

    def __init__(self, client_repo: ClientRepository):
        self.client_repo = client_repo

    def execute(
        self,
        pagination: Optional[PaginacaoInputDTO] = None,
        filtro: str = "",
    ) -> PaginatedResultDTO[ClientListItemDTO]:
        pagination = pagination or PaginacaoInputDTO()
        page = self.client_repo.list_paginated(pagination, (filtro or "").strip())
        return page.map(ClientListItemDTO.from_entity)


class RemoverClienteService:
    """
    Use Case: Excluir cliente.
    """

    def __init__(self, client_repo: ClientRepository, uow: UnitOfWork):
        self.client_repo = client_repo
        self.uow = uow

    def execute(self, client_id: str) -> ClientOutputDTO:
        """
        Remove o cliente e retorna os dados removidos.

        Raises:
            EntityNotFoundError: Se cliente não existe
        """
        with self.uow:
            client = self.client_repo.get_by_id(client_id)

            if not client:
                raise _cliente_nao_encontrado(client_id)

            self.client_repo.delete(client.id)

            self.uow.publish_event(
                ClienteRemovidoEvent(aggregate_id=client.id, name=client.name)
            )

        logger.info(f"Cliente removido: {client.id}")
        return ClientOutputDTO.from_entity(client)
