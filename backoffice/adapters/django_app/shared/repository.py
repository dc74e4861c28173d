"""
Repository Base - Implementação base de repositórios com Django ORM.

Fornece funcionalidades comuns para todos os repositórios:
- Busca por ID e por campo único
- Create/Update com tradução de IntegrityError para ConflictError
- Paginação page/take com filtro textual

Princípios:
- Repositórios são stateless
- Não contêm lógica de negócio
- Apenas persistência e queries
"""

from abc import ABC, abstractmethod
from typing import Dict, Generic, List, Optional, Type, TypeVar
import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError, models, transaction
from django.db.models import Q, QuerySet

from backoffice.core.shared.dtos import PaginacaoInputDTO, PaginatedResultDTO
from backoffice.core.shared.exceptions import ConflictError, EntityNotFoundError

logger = logging.getLogger(__name__)

# Type variables
T = TypeVar("T")  # Entity type
M = TypeVar("M", bound=models.Model)  # Model type


class BaseRepository(ABC, Generic[T, M]):
    """
    Classe base abstrata para repositórios Django.

    Type Parameters:
        T: Tipo da entidade de domínio
        M: Tipo do Model Django

    Example:
        class DjangoClientRepository(BaseRepository[ClientEntity, ClientModel]):
            model_class = ClientModel
            search_fields = ["name", "fantasy_name"]
            unique_fields = {"cnpj": "CNPJ já está em uso."}

            def to_entity(self, model):
                return ClientMapper.to_entity(model)

            def to_model(self, entity):
                return ClientMapper.to_model(entity)
    """

    # Classe do model Django (definir na subclasse)
    model_class: Type[M]

    # Campos para select_related (otimização N+1)
    select_related_fields: List[str] = []

    # Campos usados pelo filtro textual (icontains)
    search_fields: List[str] = []

    # Campo único -> mensagem de conflito
    unique_fields: Dict[str, str] = {}

    # Campo padrão de ordenação
    default_order_field: str = "created_at"

    @abstractmethod
    def to_entity(self, model: M) -> T:
        """Converte Model Django para Entity de domínio."""
        raise NotImplementedError

    @abstractmethod
    def to_model(self, entity: T) -> M:
        """Converte Entity de domínio para Model Django (não salvo)."""
        raise NotImplementedError

    def _get_base_queryset(self) -> QuerySet:
        qs = self.model_class.objects.all()

        if self.select_related_fields:
            qs = qs.select_related(*self.select_related_fields)

        return qs

    def get_by_id(self, entity_id: str) -> Optional[T]:
        """
        Busca entidade por ID.

        IDs mal formados (não UUID) são tratados como inexistentes.
        """
        try:
            model = self._get_base_queryset().get(id=entity_id)
        except (self.model_class.DoesNotExist, ValueError, DjangoValidationError):
            return None
        logger.debug(f"{self.model_class.__name__} loaded: {entity_id}")
        return self.to_entity(model)

    def _get_by(self, **lookup) -> Optional[T]:
        """Primeiro registro que satisfaz o lookup (ordenado por criação)."""
        model = (
            self._get_base_queryset()
            .filter(**lookup)
            .order_by(self.default_order_field)
            .first()
        )
        return self.to_entity(model) if model else None

    def create(self, entity: T) -> T:
        """
        Insere a entidade.

        Raises:
            ConflictError: Se algum campo único já existe
        """
        model = self.to_model(entity)
        try:
            with transaction.atomic():
                model.save(force_insert=True)
        except IntegrityError as e:
            raise self._conflict_from(entity, e)

        logger.debug(f"{self.model_class.__name__} created: {entity.id}")
        return entity

    def update(self, entity: T) -> T:
        """
        Sobrescreve todos os campos da entidade (exceto id).

        Raises:
            EntityNotFoundError: Se registro não existe
            ConflictError: Se algum campo único colide com outro registro
        """
        model = self.to_model(entity)

        # Todos os campos exceto a chave primária
        model_dict = {}
        for field in model._meta.concrete_fields:
            if not field.primary_key:
                model_dict[field.attname] = getattr(model, field.attname)

        try:
            with transaction.atomic():
                updated = self.model_class.objects.filter(id=entity.id).update(**model_dict)
        except IntegrityError as e:
            raise self._conflict_from(entity, e)

        if not updated:
            raise EntityNotFoundError(
                f"{self.model_class.__name__} não encontrado.",
                entity_type=self.model_class.__name__,
                entity_id=str(entity.id),
            )

        logger.debug(f"{self.model_class.__name__} updated: {entity.id}")
        return entity

    def delete(self, entity_id: str) -> bool:
        """
        Remove entidade.

        Returns:
            True se removido, False se não existia
        """
        deleted_count, _ = self.model_class.objects.filter(id=entity_id).delete()
        return deleted_count > 0

    def count(self) -> int:
        return self.model_class.objects.count()

    def list_paginated(
        self,
        pagination: PaginacaoInputDTO,
        filtro: str = "",
    ) -> PaginatedResultDTO[T]:
        """
        Lista entidades com paginação e filtro textual.

        Args:
            pagination: page/take
            filtro: Texto buscado (icontains) nos `search_fields`
        """
        qs = self._get_base_queryset()

        if filtro:
            qs = qs.filter(self._build_search(filtro))

        qs = qs.order_by(self.default_order_field)
        total = qs.count()

        models_page = qs[pagination.skip:pagination.skip + pagination.take]

        return PaginatedResultDTO(
            items=[self.to_entity(m) for m in models_page],
            total=total,
            pagina=pagination.page,
            por_pagina=pagination.take,
        )

    def _build_search(self, filtro: str) -> Q:
        query = Q()
        for field_name in self.search_fields:
            query |= Q(**{f"{field_name}__icontains": filtro})
        return query

    def _conflict_from(self, entity: T, error: IntegrityError) -> ConflictError:
        """
        Traduz IntegrityError para ConflictError.

        Identifica o campo pelo registro concorrente que já detém o valor.
        """
        for field_name, message in self.unique_fields.items():
            value = getattr(entity, field_name, None)
            if value in (None, ""):
                continue
            holder = (
                self.model_class.objects
                .filter(**{field_name: value})
                .exclude(id=entity.id)
            )
            if holder.exists():
                logger.warning(
                    f"{self.model_class.__name__} unique violation on {field_name}: {error}"
                )
                return ConflictError(message, field=field_name)

        logger.warning(f"{self.model_class.__name__} integrity error: {error}")
        return ConflictError("Registro em conflito com dados existentes.")
