"""
URL Configuration para o Backoffice.

Estrutura:
- /admin/ - Django Admin (cadastro de pedidos)
- /clients/ - API de Clientes
- /orders/ - API de Pedidos
- /users/ - API de Usuários
- /health/ - Health check
"""

from django.contrib import admin
from django.http import JsonResponse
from django.urls import include, path


def health(request):
    return JsonResponse({'status': 'ok'})


urlpatterns = [
    # Django Admin
    path('admin/', admin.site.urls),

    path('clients/', include('backoffice.adapters.django_app.clients.urls')),
    path('orders/', include('backoffice.adapters.django_app.orders.urls')),
    path('users/', include('backoffice.adapters.django_app.users.urls')),

    path('health/', health, name='health'),
]
