# clinic_core/insurance/models.py
from __future__ import annotations

from django.db import models

from clinic_core.common.models import TimeStampedModel


class InsuranceCompany(TimeStampedModel):
    name = models.CharField(max_length=255)
    phone = models.CharField(max_length=20)

    class Meta:
        db_table = "insurance_company"
        verbose_name_plural = "insurance companies"

    def __str__(self) -> str:
        return self.name
