"""
Configuração do Django App para Clientes.
"""

from django.apps import AppConfig


class ClientsConfig(AppConfig):
    """Configuração do app Clients."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'backoffice.adapters.django_app.clients'
    label = 'clients'
    verbose_name = 'Gestão de Clientes'
