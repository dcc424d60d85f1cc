# clinic_core/hospitals/selectors.py
from __future__ import annotations

from clinic_core.common.repository import Repository
from clinic_core.hospitals.models import Hospital, HospitalAffiliation


def hospital_repository() -> Repository[Hospital]:
    return Repository(Hospital, ordering=("id",))


def hospital_affiliation_repository() -> Repository[HospitalAffiliation]:
    return Repository(
        HospitalAffiliation,
        related=("doctor", "hospital"),
        ordering=("doctor_id", "hospital_id"),
    )
