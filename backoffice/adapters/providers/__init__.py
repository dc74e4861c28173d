"""
Provedores externos: consulta de CEP (ViaCEP) e hash de senhas.
"""
