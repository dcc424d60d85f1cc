# clinic_core/doctors/models.py
from __future__ import annotations

from django.db import models

from clinic_core.common.models import TimeStampedModel


class Doctor(TimeStampedModel):
    name = models.CharField(max_length=255)
    address = models.CharField(max_length=255)
    phone = models.CharField(max_length=20)
    specialization = models.CharField(max_length=255)

    # free-text note; structured links live in hospitals.HospitalAffiliation
    hospital_affiliation = models.CharField(max_length=255, blank=True, default="")

    class Meta:
        db_table = "doctors_doctor"
        indexes = [
            models.Index(fields=["name"]),
            models.Index(fields=["specialization"]),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.specialization})"
