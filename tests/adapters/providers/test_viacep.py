"""
Testes do ViaCEPQueryProvider.

Usa httpx.MockTransport: nenhuma requisição sai para a rede.
"""

import httpx
import pytest

from backoffice.adapters.providers.viacep import ViaCEPQueryProvider
from backoffice.core.shared.exceptions import UpstreamServiceError


SE = {
    "cep": "01001-000",
    "logradouro": "Praça da Sé",
    "complemento": "lado ímpar",
    "bairro": "Sé",
    "localidade": "São Paulo",
    "uf": "SP",
}


def make_provider(handler):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return ViaCEPQueryProvider(base_url="https://viacep.test/ws/", client=client)


def test_consulta_cep_existente():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json=SE)

    provider = make_provider(handler)
    info = provider.get_cep_info("01001-000")

    assert str(requests[0].url) == "https://viacep.test/ws/01001000/json/"
    assert info.logradouro == "Praça da Sé"
    assert info.uf == "SP"
    assert provider.build_address(info) == "Praça da Sé, Sé, São Paulo - SP"


def test_cep_inexistente():
    provider = make_provider(lambda request: httpx.Response(200, json={"erro": True}))

    with pytest.raises(UpstreamServiceError) as exc_info:
        provider.get_cep_info("99999999")

    assert exc_info.value.service == "viacep"


def test_erro_http():
    provider = make_provider(lambda request: httpx.Response(500, text="Internal Server Error"))

    with pytest.raises(UpstreamServiceError):
        provider.get_cep_info("01001000")


def test_resposta_nao_json():
    provider = make_provider(lambda request: httpx.Response(200, text="<html>manutenção</html>"))

    with pytest.raises(UpstreamServiceError):
        provider.get_cep_info("01001000")


def test_falha_de_transporte():
    def handler(request):
        raise httpx.ConnectTimeout("timeout", request=request)

    provider = make_provider(handler)

    with pytest.raises(UpstreamServiceError) as exc_info:
        provider.get_cep_info("01001000")

    assert isinstance(exc_info.value.__cause__, httpx.ConnectTimeout)


def test_cep_com_tamanho_invalido_nao_consulta():
    chamadas = []

    def handler(request):
        chamadas.append(request)
        return httpx.Response(200, json=SE)

    provider = make_provider(handler)

    with pytest.raises(UpstreamServiceError):
        provider.get_cep_info("0100")

    assert chamadas == []
