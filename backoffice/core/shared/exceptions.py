"""
Exceções de Domínio do Backoffice.

Erros tipados que atravessam as camadas sem depender do framework.
A camada de transporte (API JSON) traduz cada um para um status HTTP.

Hierarquia:
    DomainException (base)
    ├── ValidationError (entrada inválida)
    ├── EntityNotFoundError (cliente/pedido/usuário inexistente)
    ├── BusinessRuleViolationError (regra de negócio violada)
    ├── ConflictError (CNPJ, e-mail da NFe ou e-mail de usuário já em uso)
    └── UpstreamServiceError (falha em serviço externo, ex: consulta de CEP)
"""


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Example:
        try:
            service.execute(input_dto)
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (usado pela API JSON)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(DomainException):
    """
    Erro de validação de dados de entrada.

    Example:
        if not input_dto.name:
            raise ValidationError("Nome é obrigatório", field="name")
    """

    def __init__(self, message: str, field: str = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class EntityNotFoundError(DomainException):
    """
    Entidade não encontrada no repositório.

    Example:
        client = repo.get_by_id(client_id)
        if not client:
            raise EntityNotFoundError("Cliente não encontrado.", "Client", client_id)
    """

    def __init__(self, message: str, entity_type: str = None, entity_id: str = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id:
            result["entity_id"] = self.entity_id
        return result


class BusinessRuleViolationError(DomainException):
    """
    Violação de regra de negócio.

    Example:
        if input_dto.id == input_dto.current_user_id:
            raise BusinessRuleViolationError(
                "Usuário não pode remover a si mesmo",
                rule="auto_remocao_proibida"
            )
    """

    def __init__(self, message: str, rule: str = None):
        self.rule = rule
        super().__init__(message, "BUSINESS_RULE_VIOLATION")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.rule:
            result["rule"] = self.rule
        return result


class ConflictError(DomainException):
    """
    Violação de unicidade.

    Lançada quando um valor que deve ser único (CNPJ, e-mail da NFe,
    e-mail de usuário, número do pedido) já pertence a outro registro.

    Example:
        if repo.get_by_cnpj(cnpj):
            raise ConflictError("CNPJ já está em uso.", field="cnpj")
    """

    def __init__(self, message: str, field: str = None):
        self.field = field
        super().__init__(message, "CONFLICT")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class UpstreamServiceError(DomainException):
    """
    Falha de um serviço externo consumido pelo domínio.

    Os use cases não capturam esta exceção: ela chega intacta
    à camada de transporte.
    """

    def __init__(self, message: str, service: str = None):
        self.service = service
        super().__init__(message, "UPSTREAM_FAILURE")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.service:
            result["service"] = self.service
        return result
