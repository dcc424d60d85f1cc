# clinic_core/doctors/selectors.py
from __future__ import annotations

from clinic_core.common.repository import Repository
from clinic_core.doctors.models import Doctor


def doctor_repository() -> Repository[Doctor]:
    return Repository(Doctor, ordering=("id",))
