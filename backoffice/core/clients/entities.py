"""
Entidades do Domínio de Clientes.

Entidades:
- ClientEntity: Cadastro de cliente (pessoa jurídica ou física)
- PersonType: Tipo de pessoa

Regras de Negócio Encapsuladas:
- Nome obrigatório na criação
- CNPJ sempre armazenado normalizado
- Formato básico de e-mail da nota fiscal
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Dict, Optional
import re
import uuid

from backoffice.core.shared.exceptions import ValidationError

from .cnpj import normalize_cnpj


_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class PersonType(Enum):
    """Tipo de pessoa do cliente."""

    LEGAL = "LEGAL"
    PHYSICAL = "PHYSICAL"

    @classmethod
    def from_string(cls, value: str) -> "PersonType":
        """
        Converte string para enum.

        Raises:
            ValidationError: Se valor inválido
        """
        try:
            return cls[(value or "").strip().upper()]
        except KeyError:
            raise ValidationError(
                f"Tipo de pessoa inválido: {value}",
                field="person_type"
            )


@dataclass
class ClientEntity:
    """
    Entidade de Domínio: Cliente.

    Registro mutável pertencente ao repositório. Os use cases recebem
    uma cópia, alteram os campos e pedem ao repositório que a persista.

    Invariantes:
    - No máximo um cliente com um dado CNPJ (não nulo)
    - No máximo um cliente com um dado e-mail de nota fiscal (não nulo)
    - `address` é sempre derivado de `cep` pelo provedor de CEP

    Attributes:
        id: Identificador único (UUID)
        name: Nome do cliente
        person_type: Pessoa jurídica (LEGAL) ou física (PHYSICAL)
        cnpj: CNPJ normalizado ("NN NNN NNN/NNNN-NN")
        cpf: CPF (pessoa física)
        nfe_email: E-mail para envio da nota fiscal
        cep: CEP informado
        address: Endereço resolvido a partir do CEP
        address_number: Número do endereço
        corporate_name: Razão social
        fantasy_name: Nome fantasia
        phone: Telefone
        state_registration: Inscrição estadual
        created_at: Data/hora de criação
        updated_at: Data/hora da última atualização
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    name: str = ""
    person_type: PersonType = PersonType.LEGAL

    # Documentos
    cnpj: Optional[str] = None
    cpf: Optional[str] = None
    state_registration: Optional[str] = None

    # Contato
    nfe_email: Optional[str] = None
    phone: Optional[str] = None

    # Endereço
    cep: Optional[str] = None
    address: Optional[str] = None
    address_number: Optional[str] = None

    # Razão social / fantasia
    corporate_name: Optional[str] = None
    fantasy_name: Optional[str] = None

    # Timestamps
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    NAME_MAX_LENGTH: ClassVar[int] = 255

    @classmethod
    def criar(
        cls,
        name: str,
        person_type: PersonType = PersonType.LEGAL,
        cnpj: Optional[str] = None,
        nfe_email: Optional[str] = None,
        **campos: Any,
    ) -> "ClientEntity":
        """
        Factory method para criar cliente com validações.

        Args:
            name: Nome do cliente (obrigatório)
            person_type: Tipo de pessoa
            cnpj: CNPJ em qualquer formato (normalizado aqui)
            nfe_email: E-mail da nota fiscal
            **campos: Demais atributos opcionais (cep, phone, ...)

        Raises:
            ValidationError: Se dados de entrada inválidos
        """
        cls.validar_nome(name)
        if nfe_email:
            cls.validar_email(nfe_email)

        return cls(
            name=name.strip(),
            person_type=person_type,
            cnpj=normalize_cnpj(cnpj) if cnpj else None,
            nfe_email=nfe_email or None,
            **campos,
        )

    @classmethod
    def validar_nome(cls, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Nome é obrigatório", field="name")

        if len(name.strip()) > cls.NAME_MAX_LENGTH:
            raise ValidationError(
                f"Nome deve ter no máximo {cls.NAME_MAX_LENGTH} caracteres",
                field="name"
            )

    @staticmethod
    def validar_email(email: str) -> None:
        if not _EMAIL_PATTERN.match(email):
            raise ValidationError("E-mail da nota fiscal inválido", field="nfe_email")

    def atualizar_campos(self, campos: Dict[str, Any]) -> None:
        """
        Sobrescreve os atributos informados e atualiza o timestamp.

        Args:
            campos: Mapa atributo -> novo valor (apenas campos presentes)
        """
        for nome, valor in campos.items():
            setattr(self, nome, valor)
        self.touch()

    def touch(self) -> None:
        """Atualiza timestamp de modificação."""
        self.updated_at = datetime.now()

    def __repr__(self) -> str:
        return (
            f"ClientEntity("
            f"id={self.id[:8]}..., "
            f"name='{self.name[:20]}', "
            f"cnpj={self.cnpj}"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        """Comparação por ID (identidade de entidade)."""
        if not isinstance(other, ClientEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
