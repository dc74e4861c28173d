"""
Django Models para o domínio de Usuários.

Usuários do backoffice são independentes de `django.contrib.auth`:
o hash é gerado pelo DjangoHashProvider e guardado em `password_hash`.
"""

from django.db import models
from django.utils import timezone


class UserRoleChoices(models.TextChoices):
    """Choices para papel do usuário (espelha UserRole do Core)."""
    ADMIN = 'ADMIN', 'Administrador'
    USER = 'USER', 'Usuário'


class UserModel(models.Model):
    """Model Django para persistência de Usuários."""

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único do usuário"
    )

    name = models.CharField(max_length=255, db_index=True)

    email = models.EmailField(
        unique=True,
        help_text="E-mail de acesso (normalizado em minúsculas)"
    )

    password_hash = models.CharField(max_length=255)

    role = models.CharField(
        max_length=10,
        choices=UserRoleChoices.choices,
        default=UserRoleChoices.USER,
        db_index=True
    )

    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'backoffice_users'
        verbose_name = 'Usuário'
        verbose_name_plural = 'Usuários'
        ordering = ['created_at']

    def __str__(self):
        return f"{self.name} <{self.email}>"
