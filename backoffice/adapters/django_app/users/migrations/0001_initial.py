"""
Migration inicial para o domínio de Usuários.

Cria a tabela:
- backoffice_users: Usuários do backoffice
"""

from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='UserModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único do usuário'
                )),
                ('name', models.CharField(max_length=255, db_index=True)),
                ('email', models.EmailField(
                    max_length=254,
                    unique=True,
                    help_text='E-mail de acesso (normalizado em minúsculas)'
                )),
                ('password_hash', models.CharField(max_length=255)),
                ('role', models.CharField(
                    max_length=10,
                    choices=[
                        ('ADMIN', 'Administrador'),
                        ('USER', 'Usuário'),
                    ],
                    default='USER',
                    db_index=True
                )),
                ('created_at', models.DateTimeField(
                    default=django.utils.timezone.now,
                    db_index=True
                )),
                ('updated_at', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'verbose_name': 'Usuário',
                'verbose_name_plural': 'Usuários',
                'db_table': 'backoffice_users',
                'ordering': ['created_at'],
            },
        ),
    ]
