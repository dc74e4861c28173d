"""
URL patterns para o domínio de Pedidos.

Endpoints API JSON:
- GET /orders/api/ - Listar pedidos
- GET /orders/api/numero/<order_number>/ - Obter pedido pelo número
- GET /orders/api/<id>/ - Obter pedido
- DELETE /orders/api/<id>/ - Excluir pedido
"""

from django.urls import path

from . import api_views

app_name = 'orders'

urlpatterns = [
    path('api/', api_views.OrderAPIListView.as_view(), name='api_list'),

    # Busca por número (antes do <pk> para não conflitar)
    path('api/numero/<str:order_number>/', api_views.OrderAPIByNumberView.as_view(), name='api_by_number'),

    path('api/<str:pk>/', api_views.OrderAPIDetailView.as_view(), name='api_detail'),
]
