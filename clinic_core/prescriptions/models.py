# clinic_core/prescriptions/models.py
from __future__ import annotations

from django.db import models

from clinic_core.common.models import TimeStampedModel
from clinic_core.doctors.models import Doctor
from clinic_core.drugs.models import Drug
from clinic_core.patients.models import Patient


class Prescription(TimeStampedModel):
    rx_id = models.BigAutoField(primary_key=True)

    date_prescribed = models.DateTimeField()
    dosage = models.CharField(max_length=20)
    duration = models.DateTimeField()

    refillable = models.BooleanField()
    refill_no = models.PositiveIntegerField(null=True, blank=True)

    comments = models.CharField(max_length=255, blank=True, default="")
    non_refill_reason = models.CharField(max_length=255, blank=True, default="")

    patient = models.ForeignKey(Patient, on_delete=models.CASCADE, related_name="prescriptions")
    doctor = models.ForeignKey(Doctor, on_delete=models.CASCADE, related_name="prescriptions")
    drug = models.ForeignKey(Drug, on_delete=models.CASCADE, related_name="prescriptions")

    class Meta:
        db_table = "prescriptions_prescription"
        indexes = [
            models.Index(fields=["patient", "date_prescribed"]),
        ]

    def __str__(self) -> str:
        return f"Rx {self.rx_id}"
