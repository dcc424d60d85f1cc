# clinic_core/hospitals/services.py
from __future__ import annotations

from typing import Any, Mapping

from django.utils import timezone

from clinic_core.common.api.exceptions import ValidationError
from clinic_core.common.repository import Repository
from clinic_core.common.services import ResourceService, clean_text, merged, require, resolve
from clinic_core.hospitals.models import Hospital, HospitalAffiliation

HOSPITAL_REQUIRED = ("name", "address", "phone")
HOSPITAL_REQUIRED_MSG = "Hospital has to have a name, address and phone number"

AFFILIATION_REQUIRED_MSG = "Hospital affiliation has to have doctor ID and hospital ID"
AFFILIATION_DATE_MSG = "Hospital affiliation has to have an affiliation date"
AFFILIATION_DUPLICATE_MSG = "Hospital affiliation already exists"


class HospitalService(ResourceService):
    name = "hospital"
    not_found_message = "Hospital not found"

    def create(self, data: Mapping[str, Any]) -> Hospital:
        require(data, HOSPITAL_REQUIRED, HOSPITAL_REQUIRED_MSG)
        return self._insert(**{f: clean_text(data[f]) for f in HOSPITAL_REQUIRED})

    def update(self, hospital: Hospital, data: Mapping[str, Any]) -> Hospital:
        changes = {f: clean_text(data[f]) for f in HOSPITAL_REQUIRED if f in data}
        require(merged(hospital, changes, HOSPITAL_REQUIRED), HOSPITAL_REQUIRED, HOSPITAL_REQUIRED_MSG)
        return self._save(hospital, changes)


class HospitalAffiliationService(ResourceService):
    name = "hospital affiliation"
    not_found_message = "Hospital affiliation not found"

    def __init__(self, repository: Repository, *, doctors: Repository, hospitals: Repository):
        super().__init__(repository)
        self.doctors = doctors
        self.hospitals = hospitals

    def create(self, data: Mapping[str, Any]) -> HospitalAffiliation:
        require(data, ("doctor_id", "hospital_id"), AFFILIATION_REQUIRED_MSG)

        doctor = resolve(self.doctors, data["doctor_id"], "Doctor with given ID not found")
        hospital = resolve(self.hospitals, data["hospital_id"], "Hospital with given ID not found")

        if self.repository.exists(doctor=doctor, hospital=hospital):
            raise ValidationError(AFFILIATION_DUPLICATE_MSG)

        return self._insert(
            AFFILIATION_DUPLICATE_MSG,
            doctor=doctor,
            hospital=hospital,
            affiliation_date=data.get("affiliation_date") or timezone.now(),
        )

    def update(self, affiliation: HospitalAffiliation, data: Mapping[str, Any]) -> HospitalAffiliation:
        # doctor/hospital form the key and come from the path; only the date moves
        changes = {"affiliation_date": data["affiliation_date"]} if "affiliation_date" in data else {}
        require(merged(affiliation, changes, ("affiliation_date",)), ("affiliation_date",), AFFILIATION_DATE_MSG)
        return self._save(affiliation, changes)
