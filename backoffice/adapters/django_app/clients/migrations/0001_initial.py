"""
Migration inicial para o domínio de Clientes.

Cria as tabelas:
- clients: Cadastro de clientes
- client_history: Histórico de eventos
"""

from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        # =================================================================
        # Tabela: clients
        # =================================================================
        migrations.CreateModel(
            name='ClientModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único do cliente'
                )),
                ('name', models.CharField(
                    max_length=255,
                    db_index=True,
                    help_text='Nome do cliente'
                )),
                ('person_type', models.CharField(
                    max_length=20,
                    choices=[
                        ('LEGAL', 'Pessoa Jurídica'),
                        ('PHYSICAL', 'Pessoa Física'),
                    ],
                    default='LEGAL',
                    help_text='Tipo de pessoa'
                )),
                ('cnpj', models.CharField(
                    max_length=32,
                    unique=True,
                    null=True,
                    blank=True,
                    help_text='CNPJ normalizado (NN NNN NNN/NNNN-NN)'
                )),
                ('cpf', models.CharField(max_length=20, null=True, blank=True)),
                ('state_registration', models.CharField(
                    max_length=50,
                    null=True,
                    blank=True,
                    help_text='Inscrição estadual'
                )),
                ('nfe_email', models.EmailField(
                    max_length=254,
                    unique=True,
                    null=True,
                    blank=True,
                    help_text='E-mail para envio da nota fiscal'
                )),
                ('phone', models.CharField(max_length=30, null=True, blank=True)),
                ('cep', models.CharField(max_length=10, null=True, blank=True)),
                ('address', models.CharField(
                    max_length=255,
                    null=True,
                    blank=True,
                    help_text='Endereço resolvido a partir do CEP'
                )),
                ('address_number', models.CharField(max_length=20, null=True, blank=True)),
                ('corporate_name', models.CharField(
                    max_length=255,
                    null=True,
                    blank=True,
                    db_index=True,
                    help_text='Razão social'
                )),
                ('fantasy_name', models.CharField(
                    max_length=255,
                    null=True,
                    blank=True,
                    db_index=True,
                    help_text='Nome fantasia'
                )),
                ('created_at', models.DateTimeField(
                    default=django.utils.timezone.now,
                    db_index=True
                )),
                ('updated_at', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'verbose_name': 'Cliente',
                'verbose_name_plural': 'Clientes',
                'db_table': 'clients',
                'ordering': ['created_at'],
            },
        ),

        # =================================================================
        # Tabela: client_history
        # =================================================================
        migrations.CreateModel(
            name='ClientHistoryModel',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('client_id', models.CharField(
                    max_length=36,
                    db_index=True,
                    help_text='Cliente relacionado'
                )),
                ('event_id', models.CharField(
                    max_length=36,
                    unique=True,
                    help_text='UUID do evento de domínio (idempotência)'
                )),
                ('event_type', models.CharField(
                    max_length=100,
                    db_index=True,
                    help_text='Tipo do evento de domínio'
                )),
                ('event_data', models.JSONField(
                    default=dict,
                    help_text='Dados serializados do evento'
                )),
                ('occurred_at', models.DateTimeField(help_text='Quando o evento ocorreu')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
            ],
            options={
                'verbose_name': 'Histórico de Cliente',
                'verbose_name_plural': 'Histórico de Clientes',
                'db_table': 'client_history',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['client_id', 'created_at'], name='client_hist_client_idx'),
                ],
            },
        ),
    ]
