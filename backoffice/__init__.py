"""
Backoffice - Gestão de clientes, pedidos e usuários.
"""

__version__ = "0.1.0"
