"""
Testes para normalização de CNPJ.
"""

import pytest

from backoffice.core.clients.cnpj import normalize_cnpj, only_digits


class TestNormalizeCnpj:

    @pytest.mark.parametrize("raw", [
        "12345678000195",
        "12.345.678/0001-95",
        "12 345 678/0001-95",
        " 12-345-678 0001 95 ",
    ])
    def test_formatos_equivalentes(self, raw):
        assert normalize_cnpj(raw) == "12 345 678/0001-95"

    @pytest.mark.parametrize("raw", [
        "12345678000195",
        "12345",
        "1234567800019512",
        "x",
        "",
    ])
    def test_idempotente(self, raw):
        once = normalize_cnpj(raw)

        assert normalize_cnpj(once) == once

    def test_grupos_incompletos_ficam_vazios(self):
        assert normalize_cnpj("12345") == "12 345 /-"

    def test_digitos_excedentes_mantidos_ao_final(self):
        assert normalize_cnpj("1234567800019599") == "12 345 678/0001-9599"

    def test_menos_de_dois_digitos_nao_formata(self):
        assert normalize_cnpj("7") == "7"
        assert normalize_cnpj("abc") == ""


def test_only_digits():
    assert only_digits("01001-000") == "01001000"
    assert only_digits(None) == ""
