"""
Ports (Interfaces) do Domínio de Clientes.

- ClientRepository: persistência de clientes
- CEPQueryProvider: consulta de CEP (ViaCEP no adapter)
- AddressInfo: resultado de uma consulta de CEP

Também contém as implementações em memória usadas nos testes
e no TestingContainer.
"""

from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Protocol, runtime_checkable

from backoffice.core.shared.dtos import PaginacaoInputDTO, PaginatedResultDTO, paginate_list
from backoffice.core.shared.exceptions import ConflictError, UpstreamServiceError

from .cnpj import only_digits
from .entities import ClientEntity


@dataclass(frozen=True)
class AddressInfo:
    """
    Dados de endereço retornados pela consulta de CEP.

    Nomes dos campos seguem a resposta do ViaCEP.
    """

    cep: str
    logradouro: str = ""
    complemento: str = ""
    bairro: str = ""
    localidade: str = ""
    uf: str = ""


def format_address(info: AddressInfo) -> str:
    """
    Monta o endereço textual a partir de um AddressInfo.

    Formato: "{logradouro}, {bairro}, {localidade} - {uf}",
    omitindo as partes vazias.

    Example:
        >>> format_address(AddressInfo("01001000", "Praça da Sé", "", "Sé", "São Paulo", "SP"))
        'Praça da Sé, Sé, São Paulo - SP'
    """
    street = ", ".join(
        part for part in (info.logradouro, info.bairro, info.localidade) if part
    )
    if info.uf:
        return f"{street} - {info.uf}" if street else info.uf
    return street


@runtime_checkable
class ClientRepository(Protocol):
    """
    Interface para persistência de Clientes.

    Implementações:
    - DjangoClientRepository (ORM)
    - InMemoryClientRepository (testes)

    As buscas devolvem cópias: alterar a entidade retornada não
    altera o registro até `update` ser chamado.
    """

    def get_by_id(self, client_id: str) -> Optional[ClientEntity]:
        """Busca cliente por ID. None se não existir."""
        ...

    def get_by_cnpj(self, cnpj: str) -> Optional[ClientEntity]:
        """Busca cliente pelo CNPJ normalizado (correspondência exata)."""
        ...

    def get_by_nfe_email(self, nfe_email: str) -> Optional[ClientEntity]:
        """Busca o primeiro cliente com o e-mail de nota fiscal informado."""
        ...

    def create(self, client: ClientEntity) -> ClientEntity:
        """
        Persiste novo cliente.

        Raises:
            ConflictError: Se CNPJ ou e-mail da NFe já existem
        """
        ...

    def update(self, client: ClientEntity) -> ClientEntity:
        """
        Sobrescreve todos os campos do cliente (exceto id).

        Raises:
            EntityNotFoundError: Se cliente não existe
            ConflictError: Se CNPJ ou e-mail da NFe colidem com outro cliente
        """
        ...

    def delete(self, client_id: str) -> None:
        """Remove cliente."""
        ...

    def list_paginated(
        self,
        pagination: PaginacaoInputDTO,
        filtro: str = ""
    ) -> PaginatedResultDTO[ClientEntity]:
        """
        Lista clientes paginados.

        Args:
            pagination: page/take
            filtro: Texto buscado em nome, razão social, nome fantasia e CNPJ
        """
        ...


@runtime_checkable
class CEPQueryProvider(Protocol):
    """
    Interface para consulta de CEP.

    Falhas (CEP inválido, inexistente ou erro de transporte) são
    reportadas com UpstreamServiceError.
    """

    def get_cep_info(self, cep: str) -> AddressInfo:
        ...

    def build_address(self, info: AddressInfo) -> str:
        ...


class InMemoryClientRepository:
    """
    Implementação em memória do ClientRepository.

    Guarda e devolve cópias das entidades, como o ORM faria.
    Aplica as mesmas restrições de unicidade do banco.

    Example:
        repo = InMemoryClientRepository()
        repo.create(ClientEntity.criar(name="ACME"))
    """

    def __init__(self):
        self._clients: Dict[str, ClientEntity] = {}

    def get_by_id(self, client_id: str) -> Optional[ClientEntity]:
        client = self._clients.get(client_id)
        return replace(client) if client else None

    def get_by_cnpj(self, cnpj: str) -> Optional[ClientEntity]:
        for client in self._clients.values():
            if client.cnpj == cnpj:
                return replace(client)
        return None

    def get_by_nfe_email(self, nfe_email: str) -> Optional[ClientEntity]:
        for client in self._clients.values():
            if client.nfe_email == nfe_email:
                return replace(client)
        return None

    def create(self, client: ClientEntity) -> ClientEntity:
        self._check_unique(client)
        self._clients[client.id] = replace(client)
        return client

    def update(self, client: ClientEntity) -> ClientEntity:
        self._check_unique(client)
        self._clients[client.id] = replace(client)
        return client

    def delete(self, client_id: str) -> None:
        self._clients.pop(client_id, None)

    def list_paginated(
        self,
        pagination: PaginacaoInputDTO,
        filtro: str = ""
    ) -> PaginatedResultDTO[ClientEntity]:
        clients = sorted(self._clients.values(), key=lambda c: c.created_at)
        if filtro:
            clients = [c for c in clients if self._matches(c, filtro)]
        return paginate_list([replace(c) for c in clients], pagination)

    def _matches(self, client: ClientEntity, filtro: str) -> bool:
        termo = filtro.lower()
        campos = (client.name, client.corporate_name, client.fantasy_name, client.cnpj)
        return any(campo and termo in campo.lower() for campo in campos)

    def _check_unique(self, client: ClientEntity) -> None:
        for other in self._clients.values():
            if other.id == client.id:
                continue
            if client.cnpj and other.cnpj == client.cnpj:
                raise ConflictError("CNPJ já está em uso.", field="cnpj")
            if client.nfe_email and other.nfe_email == client.nfe_email:
                raise ConflictError("E-mail da nota fiscal já usado.", field="nfe_email")

    def count(self) -> int:
        return len(self._clients)

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._clients.clear()


class FakeCEPQueryProvider:
    """
    Provedor de CEP em memória.

    CEPs não cadastrados geram UpstreamServiceError, como o ViaCEP
    responde para códigos inexistentes. `calls` registra as consultas.

    Example:
        provider = FakeCEPQueryProvider({
            "01001000": AddressInfo("01001-000", "Praça da Sé", "", "Sé", "São Paulo", "SP"),
        })
    """

    def __init__(self, addresses: Optional[Dict[str, AddressInfo]] = None):
        self._addresses: Dict[str, AddressInfo] = {
            only_digits(cep): info for cep, info in (addresses or {}).items()
        }
        self.calls: List[str] = []

    def add(self, info: AddressInfo) -> None:
        self._addresses[only_digits(info.cep)] = info

    def get_cep_info(self, cep: str) -> AddressInfo:
        self.calls.append(cep)
        info = self._addresses.get(only_digits(cep))
        if info is None:
            raise UpstreamServiceError(f"CEP não encontrado: {cep}", service="cep")
        return info

    def build_address(self, info: AddressInfo) -> str:
        return format_address(info)
