# clinic_core/patients/selectors.py
from __future__ import annotations

from clinic_core.common.repository import Repository
from clinic_core.patients.models import DoctorHistory, Patient


def patient_repository() -> Repository[Patient]:
    return Repository(
        Patient,
        related=("doctor", "insurance_company", "insurance_owner"),
        ordering=("id",),
    )


def doctor_history_repository() -> Repository[DoctorHistory]:
    return Repository(
        DoctorHistory,
        related=("doctor", "patient"),
        ordering=("doctor_id", "patient_id"),
    )
