# clinic_core/patients/models.py
from __future__ import annotations

from django.db import models

from clinic_core.common.models import TimeStampedModel
from clinic_core.doctors.models import Doctor
from clinic_core.insurance.models import InsuranceCompany


class PatientRelationship(models.TextChoices):
    INSURANCE_OWNER = "insuranceOwner", "Insurance owner"
    DEPENDENT = "dependent", "Dependent"


class Patient(TimeStampedModel):
    """
    A patient belongs to one doctor and one insurance company.
    Dependents point at the patient who owns the insurance policy.
    """
    name = models.CharField(max_length=255)
    address = models.CharField(max_length=255)
    phone = models.CharField(max_length=20)
    email = models.CharField(max_length=255)

    relationship = models.CharField(max_length=20, choices=PatientRelationship.choices)

    doctor = models.ForeignKey(Doctor, on_delete=models.PROTECT, related_name="patients")
    insurance_company = models.ForeignKey(InsuranceCompany, on_delete=models.PROTECT, related_name="patients")
    insurance_owner = models.ForeignKey(
        "self",
        on_delete=models.PROTECT,
        related_name="dependents",
        null=True,
        blank=True,
    )

    class Meta:
        db_table = "patients_patient"
        indexes = [
            models.Index(fields=["name"]),
            models.Index(fields=["phone"]),
        ]

    def __str__(self) -> str:
        return self.name


class DoctorHistory(TimeStampedModel):
    """
    A patient's period under a doctor. Keyed by (doctor, patient).
    """
    doctor = models.ForeignKey(Doctor, on_delete=models.CASCADE, related_name="doctor_histories")
    patient = models.ForeignKey(Patient, on_delete=models.CASCADE, related_name="doctor_histories")

    start_date = models.DateTimeField()
    end_date = models.DateTimeField(null=True, blank=True)
    reason_for_leaving = models.CharField(max_length=255, blank=True, default="")

    class Meta:
        db_table = "patients_doctor_history"
        verbose_name_plural = "doctor histories"
        constraints = [
            models.UniqueConstraint(fields=["doctor", "patient"], name="uq_doctor_history_doctor_patient"),
        ]

    def __str__(self) -> str:
        return f"Doctor {self.doctor_id} / patient {self.patient_id}"
