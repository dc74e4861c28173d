"""
Django Admin para o domínio de Usuários.

O hash de senha é exibido somente leitura; criação e troca de
senha passam pela API (use cases).
"""

from django.contrib import admin

from .models import UserModel


@admin.register(UserModel)
class UserAdmin(admin.ModelAdmin):
    """Admin para UserModel."""

    list_display = [
        'name',
        'email',
        'role',
        'created_at',
    ]

    list_filter = ['role', 'created_at']

    search_fields = ['id', 'name', 'email']

    readonly_fields = [
        'id',
        'password_hash',
        'created_at',
        'updated_at',
    ]

    ordering = ['name']

    def has_add_permission(self, request):
        return False
