"""
Django App de Pedidos.

Pedidos são cadastrados pelo Django Admin; a API JSON oferece
consulta (por ID ou número) e exclusão.
"""
