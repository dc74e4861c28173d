"""
Django Models para o domínio de Pedidos.

Persistem os dados de OrderEntity (backoffice/core/orders/entities.py).
"""

from decimal import Decimal

from django.db import models
from django.utils import timezone


class OrderModel(models.Model):
    """
    Model Django para persistência de Pedidos.

    `client_name` é desnormalizado para que listagem e filtro não
    dependam de join. Excluir o cliente mantém o pedido.
    """

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único do pedido"
    )

    order_number = models.CharField(
        max_length=50,
        unique=True,
        help_text="Número do pedido"
    )

    client = models.ForeignKey(
        'clients.ClientModel',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='orders',
        help_text="Cliente do pedido"
    )

    client_name = models.CharField(
        max_length=255,
        blank=True,
        default='',
        db_index=True,
        help_text="Nome do cliente no momento do pedido"
    )

    description = models.TextField(blank=True, default='')

    total_value = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        help_text="Valor total"
    )

    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = 'orders'
        verbose_name = 'Pedido'
        verbose_name_plural = 'Pedidos'
        ordering = ['created_at']

    def __str__(self):
        return f"Pedido {self.order_number} - {self.client_name}"
