"""
Adapters Django: models, repositórios, API JSON e eventos.
"""
