"""
Normalização de CNPJ.

O CNPJ é armazenado no formato "NN NNN NNN/NNNN-NN". A normalização
mantém só os dígitos e reinsere a formatação pelos grupos posicionais
(2, 3, 3, 4, 2). Não há validação de quantidade de dígitos nem de
dígito verificador: grupos ausentes ficam vazios.

Example:
    >>> normalize_cnpj("12.345.678/0001-95")
    '12 345 678/0001-95'
    >>> normalize_cnpj("12345")
    '12 345 /-'
"""

import re


_NON_DIGITS = re.compile(r"\D")
_CNPJ_GROUPS = re.compile(r"^(\d{2})(\d{3})?(\d{3})?(\d{4})?(\d{2})?")


def only_digits(value: str) -> str:
    """Remove todos os caracteres que não são dígitos."""
    return _NON_DIGITS.sub("", value or "")


def normalize_cnpj(value: str) -> str:
    """
    Normaliza CNPJ para o formato de armazenamento.

    Idempotente: normalize_cnpj(normalize_cnpj(x)) == normalize_cnpj(x).
    Com menos de 2 dígitos nada é formatado; dígitos além do 14º
    são mantidos ao final, sem formatação.

    Args:
        value: CNPJ em qualquer formato

    Returns:
        CNPJ normalizado
    """
    digits = only_digits(value)
    match = _CNPJ_GROUPS.match(digits)

    if not match:
        return digits

    parts = [group or "" for group in match.groups()]
    formatted = "{} {} {}/{}-{}".format(*parts)

    return formatted + digits[match.end():]
