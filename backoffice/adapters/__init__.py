"""
Adapters - Implementações de infraestrutura dos Ports do Core.
"""
