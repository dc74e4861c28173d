"""
URL patterns para o domínio de Usuários.

Endpoints API JSON:
- GET/POST /users/api/
- GET/PATCH/DELETE /users/api/<id>/
"""

from django.urls import path

from . import api_views

app_name = 'users'

urlpatterns = [
    path('api/', api_views.UserAPIListView.as_view(), name='api_list'),
    path('api/<str:pk>/', api_views.UserAPIDetailView.as_view(), name='api_detail'),
]
