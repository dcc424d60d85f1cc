# clinic_core/common/services.py
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, Mapping

from django.db import IntegrityError
from django.db.models import Model, ProtectedError, QuerySet

from clinic_core.common.api.exceptions import ConflictError, NotFoundError, ValidationError
from clinic_core.common.repository import Repository

logger = logging.getLogger(__name__)


def is_blank(value: Any) -> bool:
    """None and whitespace-only strings count as missing. False/0 do not."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def clean_text(value: str | None) -> str:
    return (value or "").strip()


def require(values: Mapping[str, Any], fields: Iterable[str], message: str) -> None:
    if any(is_blank(values.get(f)) for f in fields):
        raise ValidationError(message)


def resolve(repository: Repository, pk: Any, message: str) -> Model:
    """Look up a foreign-key target; a missing row is a 400, not a 404."""
    obj = repository.find_one(pk=pk)
    if obj is None:
        raise ValidationError(message)
    return obj


def merged(instance: Model, changes: Mapping[str, Any], fields: Iterable[str]) -> dict[str, Any]:
    """
    The record as it would look after a partial update:
    supplied values win, absent ones fall back to what is stored.
    """
    return {f: changes[f] if f in changes else getattr(instance, f) for f in fields}


class ResourceService(ABC):
    """
    Shared read/delete behaviour for one resource.
    Subclasses implement create() and update() with their own validation.
    """
    name = "record"
    not_found_message = "Record not found"
    delete_conflict_message = "Record is still referenced by other records"

    def __init__(self, repository: Repository):
        self.repository = repository

    def find(self) -> QuerySet:
        return self.repository.find()

    def get(self, **key: Any) -> Model:
        obj = self.repository.find_one(**key)
        if obj is None:
            raise NotFoundError(self.not_found_message)
        return obj

    @abstractmethod
    def create(self, data: Mapping[str, Any]) -> Model: ...

    @abstractmethod
    def update(self, instance: Model, data: Mapping[str, Any]) -> Model: ...

    def delete(self, instance: Model) -> None:
        key = instance.pk
        try:
            self.repository.delete(instance)
        except ProtectedError:
            raise ConflictError(self.delete_conflict_message)
        logger.info("Deleted %s %s", self.name, key)

    # helpers for subclasses

    def _insert(self, duplicate_message: str | None = None, **values: Any) -> Model:
        try:
            obj = self.repository.insert(**values)
        except IntegrityError:
            if duplicate_message is None:
                raise
            raise ValidationError(duplicate_message)
        logger.info("Created %s %s", self.name, obj.pk)
        return obj

    def _save(self, instance: Model, changes: Mapping[str, Any]) -> Model:
        obj = self.repository.update(instance, changes)
        logger.info("Updated %s %s (%s)", self.name, obj.pk, ", ".join(sorted(changes)) or "no changes")
        return obj
