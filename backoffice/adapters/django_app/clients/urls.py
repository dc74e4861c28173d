"""
URL patterns para o domínio de Clientes.

Endpoints API JSON:
- GET /clients/api/ - Listar clientes
- POST /clients/api/ - Criar cliente
- GET /clients/api/<id>/ - Obter cliente
- PATCH /clients/api/<id>/ - Atualizar cliente
- DELETE /clients/api/<id>/ - Excluir cliente
"""

from django.urls import path

from . import api_views

app_name = 'clients'

urlpatterns = [
    # Listagem e criação
    path('api/', api_views.ClientAPIListView.as_view(), name='api_list'),

    # Detalhes, atualização e exclusão
    path('api/<str:pk>/', api_views.ClientAPIDetailView.as_view(), name='api_detail'),
]
