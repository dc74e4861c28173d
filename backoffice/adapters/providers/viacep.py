"""
Provedor de CEP sobre a API pública do ViaCEP.

Implementa o port CEPQueryProvider:
    GET {base_url}/{cep}/json/

O ViaCEP responde 200 com {"erro": true} para CEPs inexistentes e
400 para formatos inválidos; ambos viram UpstreamServiceError.
"""

import logging
from typing import Optional

import httpx

from backoffice.core.clients.cnpj import only_digits
from backoffice.core.clients.ports import AddressInfo, format_address
from backoffice.core.shared.exceptions import UpstreamServiceError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://viacep.com.br/ws"
DEFAULT_TIMEOUT = 10.0
CEP_LENGTH = 8


class ViaCEPQueryProvider:
    """
    Consulta de CEP via ViaCEP.

    Example:
        provider = ViaCEPQueryProvider(timeout=5)
        info = provider.get_cep_info("01001-000")
        provider.build_address(info)  # 'Praça da Sé, Sé, São Paulo - SP'
    """

    SERVICE_NAME = "viacep"

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.Client] = None,
    ):
        """
        Args:
            base_url: URL base da API (sem barra final)
            timeout: Timeout da requisição em segundos
            client: Cliente httpx já configurado (testes injetam transport)
        """
        self._base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self._timeout = float(timeout)
        self._client = client

    def get_cep_info(self, cep: str) -> AddressInfo:
        """
        Consulta o CEP.

        Raises:
            UpstreamServiceError: CEP inválido, inexistente ou falha HTTP
        """
        digits = only_digits(cep)
        if len(digits) != CEP_LENGTH:
            raise self._failure(f"CEP inválido: {cep}")

        url = f"{self._base_url}/{digits}/json/"
        logger.debug(f"Consultando ViaCEP: {url}")

        try:
            response = self._get(url)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            raise self._failure(f"Falha ao consultar CEP {digits}: {e}") from e
        except ValueError as e:
            raise self._failure(f"Resposta inválida do ViaCEP para {digits}") from e

        if not isinstance(payload, dict) or payload.get("erro"):
            raise self._failure(f"CEP não encontrado: {digits}")

        return AddressInfo(
            cep=payload.get("cep") or digits,
            logradouro=payload.get("logradouro") or "",
            complemento=payload.get("complemento") or "",
            bairro=payload.get("bairro") or "",
            localidade=payload.get("localidade") or "",
            uf=payload.get("uf") or "",
        )

    def build_address(self, info: AddressInfo) -> str:
        return format_address(info)

    def _get(self, url: str) -> httpx.Response:
        if self._client is not None:
            return self._client.get(url, timeout=self._timeout)
        with httpx.Client(timeout=self._timeout) as client:
            return client.get(url)

    def _failure(self, message: str) -> UpstreamServiceError:
        logger.warning(message)
        return UpstreamServiceError(message, service=self.SERVICE_NAME)
