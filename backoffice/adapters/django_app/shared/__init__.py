"""
Componentes Django compartilhados: Unit of Work, repositório base e API base.
"""
