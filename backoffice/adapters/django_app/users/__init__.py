"""
Django App de Usuários do backoffice.
"""
