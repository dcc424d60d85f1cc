# clinic_core/hospitals/models.py
from __future__ import annotations

from django.db import models
from django.utils import timezone

from clinic_core.common.models import TimeStampedModel
from clinic_core.doctors.models import Doctor


class Hospital(TimeStampedModel):
    name = models.CharField(max_length=255)
    address = models.CharField(max_length=255)
    phone = models.CharField(max_length=20)

    class Meta:
        db_table = "hospitals_hospital"

    def __str__(self) -> str:
        return self.name


class HospitalAffiliation(TimeStampedModel):
    """
    Doctor <-> hospital link. Keyed by (doctor, hospital); the surrogate id
    is never exposed.
    """
    doctor = models.ForeignKey(Doctor, on_delete=models.CASCADE, related_name="hospital_affiliations")
    hospital = models.ForeignKey(Hospital, on_delete=models.CASCADE, related_name="hospital_affiliations")
    affiliation_date = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "hospitals_affiliation"
        constraints = [
            models.UniqueConstraint(fields=["doctor", "hospital"], name="uq_affiliation_doctor_hospital"),
        ]

    def __str__(self) -> str:
        return f"Doctor {self.doctor_id} @ hospital {self.hospital_id}"
