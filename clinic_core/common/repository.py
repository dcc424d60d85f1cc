# clinic_core/common/repository.py
from __future__ import annotations

from typing import Any, Generic, Iterable, Mapping, TypeVar

from django.db import models, transaction
from django.db.models import QuerySet

M = TypeVar("M", bound=models.Model)


class Repository(Generic[M]):
    """
    Storage port for one model.

    Every read goes through `find()` so the declared relations are always
    loaded eagerly (single JOINed query via select_related).
    """

    def __init__(self, model: type[M], *, related: Iterable[str] = (), ordering: Iterable[str] = ()):
        self.model = model
        self.related = tuple(related)
        self.ordering = tuple(ordering) or (model._meta.pk.name,)

    def find(self, **filters: Any) -> QuerySet[M]:
        qs = self.model.objects.all()
        if self.related:
            qs = qs.select_related(*self.related)
        if filters:
            qs = qs.filter(**filters)
        return qs.order_by(*self.ordering)

    def find_one(self, **filters: Any) -> M | None:
        return self.find(**filters).first()

    def exists(self, **filters: Any) -> bool:
        return self.model.objects.filter(**filters).exists()

    def insert(self, **values: Any) -> M:
        # savepoint so a constraint violation does not poison an outer transaction
        with transaction.atomic():
            return self.model.objects.create(**values)

    def update(self, instance: M, changes: Mapping[str, Any]) -> M:
        """
        Partial update: only keys present in `changes` overwrite the instance.
        """
        for field, value in changes.items():
            setattr(instance, field, value)
        with transaction.atomic():
            instance.save()
        return instance

    def delete(self, instance: M) -> None:
        instance.delete()
