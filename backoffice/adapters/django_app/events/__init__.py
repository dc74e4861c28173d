"""
Publicadores e handlers de Domain Events.
"""
