"""
Configuração do Django App para Pedidos.
"""

from django.apps import AppConfig


class OrdersConfig(AppConfig):
    """Configuração do app Orders."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'backoffice.adapters.django_app.orders'
    label = 'orders'
    verbose_name = 'Gestão de Pedidos'
