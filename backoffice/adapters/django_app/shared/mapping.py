"""
Utilitários de conversão usados pelos Mappers.
"""

from datetime import datetime
from typing import Optional

from django.utils import timezone


def to_aware(value: Optional[datetime]) -> Optional[datetime]:
    """
    Garante datetime com timezone antes de gravar.

    As entidades usam `datetime.now()` (naive); com USE_TZ=True o
    Django espera valores aware.
    """
    if value is None:
        return None
    if timezone.is_naive(value):
        return timezone.make_aware(value)
    return value


def empty_to_none(value: Optional[str]) -> Optional[str]:
    """String vazia vira NULL (colunas únicas aceitam vários NULL)."""
    return value or None
