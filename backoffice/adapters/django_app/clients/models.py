"""
Django Models para o domínio de Clientes.

Estes models são ADAPTERS: persistem os dados de ClientEntity,
definida em backoffice/core/clients/entities.py.

- ClientModel: Cadastro de clientes
- ClientHistoryModel: Histórico de eventos do cliente (preenchido
  pelo handler Celery `record_client_history`)

As restrições `unique` de cnpj e nfe_email fecham a corrida entre a
verificação de unicidade e a escrita feita pelos use cases.
"""

from django.db import models
from django.utils import timezone


class PersonTypeChoices(models.TextChoices):
    """Choices para tipo de pessoa (espelha PersonType do Core)."""
    LEGAL = 'LEGAL', 'Pessoa Jurídica'
    PHYSICAL = 'PHYSICAL', 'Pessoa Física'


class ClientModel(models.Model):
    """
    Model Django para persistência de Clientes.

    NÃO contém lógica de negócio, apenas estrutura de dados.
    Valores únicos ausentes são gravados como NULL para não
    colidirem entre si.
    """

    # Primary Key - UUID gerado pela Entity
    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único do cliente"
    )

    name = models.CharField(
        max_length=255,
        db_index=True,
        help_text="Nome do cliente"
    )

    person_type = models.CharField(
        max_length=20,
        choices=PersonTypeChoices.choices,
        default=PersonTypeChoices.LEGAL,
        help_text="Tipo de pessoa"
    )

    # Documentos
    cnpj = models.CharField(
        max_length=32,
        unique=True,
        null=True,
        blank=True,
        help_text="CNPJ normalizado (NN NNN NNN/NNNN-NN)"
    )

    cpf = models.CharField(max_length=20, null=True, blank=True)

    state_registration = models.CharField(
        max_length=50,
        null=True,
        blank=True,
        help_text="Inscrição estadual"
    )

    # Contato
    nfe_email = models.EmailField(
        unique=True,
        null=True,
        blank=True,
        help_text="E-mail para envio da nota fiscal"
    )

    phone = models.CharField(max_length=30, null=True, blank=True)

    # Endereço
    cep = models.CharField(max_length=10, null=True, blank=True)

    address = models.CharField(
        max_length=255,
        null=True,
        blank=True,
        help_text="Endereço resolvido a partir do CEP"
    )

    address_number = models.CharField(max_length=20, null=True, blank=True)

    corporate_name = models.CharField(
        max_length=255,
        null=True,
        blank=True,
        db_index=True,
        help_text="Razão social"
    )

    fantasy_name = models.CharField(
        max_length=255,
        null=True,
        blank=True,
        db_index=True,
        help_text="Nome fantasia"
    )

    # Timestamps
    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'clients'
        verbose_name = 'Cliente'
        verbose_name_plural = 'Clientes'
        ordering = ['created_at']

    def __str__(self):
        return f"[{self.id[:8]}] {self.name}"


class ClientHistoryModel(models.Model):
    """
    Histórico de eventos de clientes.

    Guarda `client_id` sem chave estrangeira para manter o
    registro de remoção depois que o cliente é excluído.
    """

    id = models.BigAutoField(primary_key=True)

    client_id = models.CharField(
        max_length=36,
        db_index=True,
        help_text="Cliente relacionado"
    )

    event_id = models.CharField(
        max_length=36,
        unique=True,
        help_text="UUID do evento de domínio (idempotência)"
    )

    event_type = models.CharField(
        max_length=100,
        db_index=True,
        help_text="Tipo do evento de domínio"
    )

    event_data = models.JSONField(
        default=dict,
        help_text="Dados serializados do evento"
    )

    occurred_at = models.DateTimeField(help_text="Quando o evento ocorreu")

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = 'client_history'
        verbose_name = 'Histórico de Cliente'
        verbose_name_plural = 'Histórico de Clientes'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['client_id', 'created_at'], name='client_hist_client_idx'),
        ]

    def __str__(self):
        return f"{self.event_type} - {self.client_id[:8]} @ {self.occurred_at}"
