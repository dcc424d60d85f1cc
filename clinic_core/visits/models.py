# clinic_core/visits/models.py
from __future__ import annotations

from django.db import models

from clinic_core.common.models import TimeStampedModel
from clinic_core.doctors.models import Doctor
from clinic_core.patients.models import Patient


class OfficeVisit(TimeStampedModel):
    """
    One appointment of a patient with a doctor, keyed by (patient, doctor, visit_date).
    Exactly one of the four visit kinds is set; each kind carries its own findings.
    """
    patient = models.ForeignKey(Patient, on_delete=models.CASCADE, related_name="office_visits")
    doctor = models.ForeignKey(Doctor, on_delete=models.CASCADE, related_name="office_visits")
    visit_date = models.DateTimeField()

    symptoms = models.TextField(blank=True, default="")

    initial_visit = models.BooleanField(default=False)
    initial_diagnosis = models.TextField(blank=True, default="")

    followup_visit = models.BooleanField(default=False)
    diagnosis_status = models.TextField(blank=True, default="")

    routine_visit = models.BooleanField(default=False)
    blood_pressure = models.TextField(blank=True, default="")
    height = models.FloatField(null=True, blank=True)
    weight = models.FloatField(null=True, blank=True)

    other_visit = models.BooleanField(default=False)
    diagnosis = models.TextField(blank=True, default="")

    class Meta:
        db_table = "visits_office_visit"
        constraints = [
            models.UniqueConstraint(
                fields=["patient", "doctor", "visit_date"],
                name="uq_office_visit_patient_doctor_date",
            ),
        ]
        indexes = [
            models.Index(fields=["visit_date"]),
        ]

    def __str__(self) -> str:
        return f"Patient {self.patient_id} / doctor {self.doctor_id} @ {self.visit_date:%Y-%m-%d %H:%M}"
