"""
Django Admin para o domínio de Pedidos.

O admin é o ponto de cadastro de pedidos: ao escolher o cliente,
o nome é copiado para `client_name`.
"""

import uuid

from django.contrib import admin

from .models import OrderModel


@admin.register(OrderModel)
class OrderAdmin(admin.ModelAdmin):
    """Admin para OrderModel."""

    list_display = [
        'order_number',
        'client_name',
        'total_value',
        'created_at',
    ]

    list_filter = ['created_at']

    search_fields = [
        'order_number',
        'client_name',
        'description',
    ]

    readonly_fields = [
        'id',
        'client_name',
        'created_at',
    ]

    fieldsets = [
        ('Pedido', {
            'fields': ['id', 'order_number', 'description', 'total_value'],
        }),
        ('Cliente', {
            'fields': ['client', 'client_name'],
        }),
        ('Timestamps', {
            'fields': ['created_at'],
            'classes': ['collapse'],
        }),
    ]

    autocomplete_fields = ['client']

    ordering = ['-created_at']

    date_hierarchy = 'created_at'

    def save_model(self, request, obj, form, change):
        if not obj.id:
            obj.id = str(uuid.uuid4())
        if obj.client is not None:
            obj.client_name = obj.client.name
        super().save_model(request, obj, form, change)
