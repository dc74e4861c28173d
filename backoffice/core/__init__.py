"""
Core Domain Layer - O Hexágono.

Lógica de negócio do backoffice (clientes, pedidos, usuários),
sem dependências de frameworks.
Características:
- Zero dependências externas (Django, httpx, etc.)
- 100% testável sem banco de dados
- Agnóstico a infraestrutura
"""
