"""
Django Admin para o domínio de Clientes.

Cadastro de clientes e consulta (somente leitura) do histórico
de eventos gravado pelos handlers Celery.
"""

from django.contrib import admin
from django.utils.html import format_html

from .models import ClientHistoryModel, ClientModel


@admin.register(ClientModel)
class ClientAdmin(admin.ModelAdmin):
    """Admin para ClientModel."""

    list_display = [
        'id_curto',
        'name',
        'person_type',
        'cnpj',
        'fantasy_name',
        'nfe_email',
        'phone',
        'created_at',
    ]

    list_filter = [
        'person_type',
        'created_at',
    ]

    search_fields = [
        'id',
        'name',
        'corporate_name',
        'fantasy_name',
        'cnpj',
        'nfe_email',
    ]

    readonly_fields = [
        'id',
        'created_at',
        'updated_at',
    ]

    fieldsets = [
        ('Identificação', {
            'fields': ['id', 'name', 'person_type', 'corporate_name', 'fantasy_name'],
        }),
        ('Documentos', {
            'fields': ['cnpj', 'cpf', 'state_registration'],
        }),
        ('Contato', {
            'fields': ['nfe_email', 'phone'],
        }),
        ('Endereço', {
            'fields': ['cep', 'address', 'address_number'],
        }),
        ('Timestamps', {
            'fields': ['created_at', 'updated_at'],
            'classes': ['collapse'],
        }),
    ]

    ordering = ['-created_at']

    date_hierarchy = 'created_at'

    def id_curto(self, obj):
        """Exibe ID curto (primeiros 8 caracteres)."""
        return obj.id[:8] + '...'
    id_curto.short_description = 'ID'


@admin.register(ClientHistoryModel)
class ClientHistoryAdmin(admin.ModelAdmin):
    """Admin para histórico de clientes (somente leitura)."""

    list_display = [
        'client_id_curto',
        'event_badge',
        'occurred_at',
        'created_at',
    ]

    list_filter = [
        'event_type',
        'occurred_at',
    ]

    search_fields = [
        'client_id',
        'event_id',
    ]

    readonly_fields = [
        'client_id',
        'event_id',
        'event_type',
        'event_data',
        'occurred_at',
        'created_at',
    ]

    ordering = ['-created_at']

    def client_id_curto(self, obj):
        return obj.client_id[:8] + '...'
    client_id_curto.short_description = 'Cliente'

    def event_badge(self, obj):
        """Exibe tipo do evento com badge colorido."""
        colors = {
            'ClienteCriadoEvent': '#28a745',
            'ClienteAtualizadoEvent': '#17a2b8',
            'ClienteRemovidoEvent': '#dc3545',
        }
        color = colors.get(obj.event_type, '#6c757d')
        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 8px; '
            'border-radius: 3px; font-size: 11px;">{}</span>',
            color,
            obj.event_type
        )
    event_badge.short_description = 'Evento'

    def has_add_permission(self, request):
        # Histórico é gravado apenas pelos handlers
        return False

    def has_change_permission(self, request, obj=None):
        return False
