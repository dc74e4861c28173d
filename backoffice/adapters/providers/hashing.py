"""
Hash de senhas com os hashers configurados no Django
(PASSWORD_HASHERS).
"""

from django.contrib.auth.hashers import check_password, make_password


class DjangoHashProvider:
    """Implementação do port HashProvider sobre django.contrib.auth.hashers."""

    def generate_hash(self, payload: str) -> str:
        return make_password(payload)

    def compare_hash(self, payload: str, hashed: str) -> bool:
        return check_password(payload, hashed)
