# clinic_core/prescriptions/selectors.py
from __future__ import annotations

from clinic_core.common.repository import Repository
from clinic_core.prescriptions.models import Prescription


def prescription_repository() -> Repository[Prescription]:
    return Repository(Prescription, related=("patient", "doctor", "drug"))
