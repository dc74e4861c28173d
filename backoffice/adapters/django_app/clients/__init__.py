"""
Adapter Django do domínio de Clientes.
"""
