"""
Infraestrutura comum das API Views JSON.

Formato:
- Entrada: JSON (body) e query string (page, take, filter)
- Saída: JSON com estrutura {success, data/error, meta}

Tradução de exceções para HTTP:
- ValidationError -> 400
- EntityNotFoundError -> 404
- ConflictError -> 409
- BusinessRuleViolationError -> 422
- UpstreamServiceError -> 502
- DomainException / ValueError -> 400
- Outras -> 500
"""

import json
import logging
from typing import Any, Dict, Iterable, Optional

from django.conf import settings
from django.http import HttpRequest, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from backoffice.config.container import get_container
from backoffice.core.shared.dtos import DEFAULT_PAGE, PaginacaoInputDTO, PaginatedResultDTO
from backoffice.core.shared.exceptions import (
    BusinessRuleViolationError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    UpstreamServiceError,
    ValidationError,
)

logger = logging.getLogger(__name__)


USER_ID_HEADER = 'HTTP_X_USER_ID'


# =============================================================================
# Helpers
# =============================================================================

def json_response(success: bool, data: Any = None, error: str = None,
                  status: int = 200, meta: Dict = None) -> JsonResponse:
    """
    Cria resposta JSON padronizada.

    Args:
        success: Se operação foi bem sucedida
        data: Dados da resposta
        error: Mensagem de erro (se aplicável)
        status: HTTP status code
        meta: Metadados adicionais
    """
    response = {'success': success}

    if data is not None:
        response['data'] = data

    if error is not None:
        response['error'] = error

    if meta is not None:
        response['meta'] = meta

    return JsonResponse(response, status=status)


def paginated_response(page: PaginatedResultDTO) -> JsonResponse:
    """Resposta de listagem: itens em `data`, contadores em `meta`."""
    page_dict = page.to_dict()
    items = page_dict.pop('items')
    return json_response(success=True, data=items, meta=page_dict)


def parse_json_body(request: HttpRequest) -> Dict:
    """
    Parseia body JSON do request.

    Raises:
        ValueError: Se JSON inválido ou não for um objeto
    """
    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except json.JSONDecodeError as e:
        raise ValueError(f"JSON inválido: {e}")

    if not isinstance(data, dict):
        raise ValueError("Corpo da requisição deve ser um objeto JSON")
    return data


def require_text_fields(data: Dict, fields: Iterable[str]) -> None:
    """
    Garante que os campos informados são texto (ou nulos/ausentes).

    Raises:
        ValidationError: No primeiro campo com outro tipo JSON
    """
    for field in fields:
        value = data.get(field)
        if value is not None and not isinstance(value, str):
            raise ValidationError(f"Campo '{field}' deve ser texto", field=field)


def parse_pagination(request: HttpRequest) -> PaginacaoInputDTO:
    """
    Lê `page` e `take` da query string.

    Raises:
        ValidationError: Valores não numéricos ou fora do intervalo
    """
    default_take = getattr(settings, 'PAGINATION_DEFAULT_TAKE', 5)
    try:
        page = int(request.GET.get('page', DEFAULT_PAGE))
        take = int(request.GET.get('take', default_take))
    except ValueError:
        raise ValidationError("Parâmetros de paginação devem ser inteiros", field="page")
    return PaginacaoInputDTO(page=page, take=take)


def get_user_id(request: HttpRequest) -> Optional[str]:
    """Extrai ID do usuário autenticado (header X-User-Id)."""
    return request.META.get(USER_ID_HEADER) or None


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Fornece:
    - Parsing de JSON
    - Acesso ao container DI
    - Tratamento de erros padronizado
    """

    def get_container(self):
        """Retorna container de DI."""
        return get_container()

    def get_service(self, service_name: str):
        """Obtém service do container."""
        return getattr(self.get_container(), service_name)()

    def parse_body(self, request: HttpRequest) -> Dict:
        return parse_json_body(request)

    def handle_exception(self, e: Exception) -> JsonResponse:
        """
        Trata exceções e retorna resposta apropriada.

        Subclasses precisam vir antes de DomainException.
        """
        if isinstance(e, ValidationError):
            return json_response(
                success=False,
                error=e.message,
                status=400,
                meta={'code': e.code, 'field': e.field}
            )

        if isinstance(e, EntityNotFoundError):
            return json_response(
                success=False,
                error=e.message,
                status=404,
                meta={'code': e.code}
            )

        if isinstance(e, ConflictError):
            return json_response(
                success=False,
                error=e.message,
                status=409,
                meta={'code': e.code, 'field': e.field}
            )

        if isinstance(e, BusinessRuleViolationError):
            return json_response(
                success=False,
                error=e.message,
                status=422,
                meta={'code': e.code, 'rule': e.rule}
            )

        if isinstance(e, UpstreamServiceError):
            logger.warning(f"Falha em serviço externo ({e.service}): {e.message}")
            return json_response(
                success=False,
                error=e.message,
                status=502,
                meta={'code': e.code, 'service': e.service}
            )

        if isinstance(e, DomainException):
            return json_response(
                success=False,
                error=e.message,
                status=400,
                meta={'code': e.code}
            )

        if isinstance(e, ValueError):
            return json_response(
                success=False,
                error=str(e),
                status=400
            )

        # Erro inesperado
        logger.exception(f"Erro inesperado na API: {e}")
        return json_response(
            success=False,
            error="Erro interno do servidor",
            status=500
        )
