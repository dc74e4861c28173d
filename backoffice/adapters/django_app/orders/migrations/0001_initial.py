"""
Migration inicial para o domínio de Pedidos.

Cria a tabela:
- orders: Pedidos (FK opcional para clients)
"""

from decimal import Decimal

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
        ('clients', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='OrderModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único do pedido'
                )),
                ('order_number', models.CharField(
                    max_length=50,
                    unique=True,
                    help_text='Número do pedido'
                )),
                ('client', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='orders',
                    to='clients.clientmodel',
                    help_text='Cliente do pedido'
                )),
                ('client_name', models.CharField(
                    max_length=255,
                    blank=True,
                    default='',
                    db_index=True,
                    help_text='Nome do cliente no momento do pedido'
                )),
                ('description', models.TextField(blank=True, default='')),
                ('total_value', models.DecimalField(
                    max_digits=12,
                    decimal_places=2,
                    default=Decimal('0.00'),
                    help_text='Valor total'
                )),
                ('created_at', models.DateTimeField(
                    default=django.utils.timezone.now,
                    db_index=True
                )),
            ],
            options={
                'verbose_name': 'Pedido',
                'verbose_name_plural': 'Pedidos',
                'db_table': 'orders',
                'ordering': ['created_at'],
            },
        ),
    ]
