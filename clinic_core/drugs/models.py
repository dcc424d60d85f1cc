# clinic_core/drugs/models.py
from __future__ import annotations

from django.db import models

from clinic_core.common.models import TimeStampedModel


class Drug(TimeStampedModel):
    drug_name = models.CharField(max_length=255)
    side_effects = models.CharField(max_length=255)
    benefits = models.CharField(max_length=255)

    class Meta:
        db_table = "drugs_drug"
        indexes = [
            models.Index(fields=["drug_name"]),
        ]

    def __str__(self) -> str:
        return self.drug_name
