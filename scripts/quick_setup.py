#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Configura Django settings
2. Executa migrations
3. Cria dados de exemplo (opcional): usuários, clientes e pedidos

Uso (com o pacote instalado: pip install -e .):
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
"""

import argparse
import os
from decimal import Decimal


def setup_django():
    """Configura Django para uso standalone."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'backoffice.config.settings')

    import django
    django.setup()


def run_migrations():
    from django.core.management import call_command

    print("📦 Executando migrations...")
    call_command('migrate', verbosity=1)
    print("✅ Migrations concluídas!")


def create_sample_data():
    """
    Cria dados de exemplo passando pelos use cases.

    Clientes são criados sem CEP para não depender do ViaCEP.
    """
    from backoffice.adapters.django_app.orders.repositories import DjangoOrderRepository
    from backoffice.config.container import get_container
    from backoffice.core.clients.dtos import CriarClienteInputDTO
    from backoffice.core.orders.entities import OrderEntity
    from backoffice.core.shared.exceptions import ConflictError
    from backoffice.core.users.dtos import CriarUsuarioInputDTO

    container = get_container()

    print("👤 Criando usuários de exemplo...")
    sample_users = [
        CriarUsuarioInputDTO(name='Administrador', email='admin@backoffice.local', password='admin123', role='ADMIN'),
        CriarUsuarioInputDTO(name='Operador', email='operador@backoffice.local', password='operador123'),
    ]
    for dto in sample_users:
        try:
            user = container.criar_usuario_service().execute(dto)
            print(f"   ✓ {user.email}")
        except ConflictError:
            print(f"   - {dto.email} já existe")

    print("🏢 Criando clientes de exemplo...")
    sample_clients = [
        CriarClienteInputDTO(
            name='ACME Comércio',
            cnpj='12345678000195',
            nfe_email='nfe@acme.com.br',
            corporate_name='ACME Comércio de Ferramentas LTDA',
            fantasy_name='ACME',
            phone='(11) 4000-1000',
        ),
        CriarClienteInputDTO(
            name='Padaria Central',
            cnpj='98765432000110',
            nfe_email='fiscal@padariacentral.com.br',
            fantasy_name='Pão Quente',
        ),
    ]
    clients = []
    for dto in sample_clients:
        try:
            client = container.criar_cliente_service().execute(dto)
            clients.append(client)
            print(f"   ✓ {client.name} ({client.cnpj})")
        except ConflictError:
            print(f"   - {dto.name} já existe")

    if clients:
        print("🧾 Criando pedidos de exemplo...")
        order_repo = DjangoOrderRepository()
        for index, client in enumerate(clients, start=1):
            order = OrderEntity.criar(
                order_number=f"PED-{index:04d}",
                client_id=client.id,
                client_name=client.name,
                description='Pedido de exemplo',
                total_value=Decimal('150.00') * index,
            )
            try:
                order_repo.create(order)
                print(f"   ✓ {order.order_number}")
            except ConflictError:
                print(f"   - {order.order_number} já existe")

    print("✅ Dados de exemplo criados!")


def check_connection():
    """Verifica conexão com o banco."""
    from django.db import connection
    from django.db.utils import OperationalError

    print("🔍 Verificando conexão com o banco...")

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except OperationalError as e:
        print(f"❌ Erro de conexão: {e}")
        return False
    print("✅ Conexão OK!")
    return True


def show_info():
    from django.conf import settings

    print("\n" + "=" * 60)
    print("📊 Informações do Setup")
    print("=" * 60)
    print(f"  Database Engine: {settings.DATABASES['default']['ENGINE']}")
    print(f"  Database Name: {settings.DATABASES['default']['NAME']}")
    print(f"  Event Publisher: {settings.EVENT_PUBLISHER_MODE}")
    print(f"  Debug Mode: {settings.DEBUG}")
    print("=" * 60)
    print("\n🚀 Próximos passos:")
    print("   1. python manage.py runserver")
    print("   2. Acesse: http://localhost:8000/admin/")
    print("   3. Acesse: http://localhost:8000/clients/api/")
    print("\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desenvolvimento')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Criar dados de exemplo'
    )
    parser.add_argument(
        '--check-only',
        action='store_true',
        help='Apenas verificar conexão'
    )

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("🔧 Backoffice - Quick Setup")
    print("=" * 60 + "\n")

    setup_django()

    if args.check_only:
        check_connection()
        return

    if not check_connection():
        print("\n⚠️  Certifique-se de que o banco de dados está rodando.")
        print("   Sem DATABASE_URL/DATABASE_HOST o projeto usa SQLite.")
        return

    run_migrations()

    if args.with_sample_data:
        create_sample_data()

    show_info()


if __name__ == '__main__':
    main()
