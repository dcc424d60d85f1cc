# clinic_core/visits/selectors.py
from __future__ import annotations

from clinic_core.common.repository import Repository
from clinic_core.visits.models import OfficeVisit


def office_visit_repository() -> Repository[OfficeVisit]:
    return Repository(
        OfficeVisit,
        related=("patient", "doctor"),
        ordering=("patient_id", "doctor_id", "visit_date"),
    )
