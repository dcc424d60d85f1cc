# clinic_core/doctors/services.py
from __future__ import annotations

from typing import Any, Mapping

from clinic_core.common.services import ResourceService, clean_text, merged, require
from clinic_core.doctors.models import Doctor

DOCTOR_REQUIRED = ("name", "address", "phone", "specialization")
DOCTOR_REQUIRED_MSG = "Doctor has to have name, address, phone and specialization"
DOCTOR_TEXT = (*DOCTOR_REQUIRED, "hospital_affiliation")


class DoctorService(ResourceService):
    name = "doctor"
    not_found_message = "Doctor not found"
    delete_conflict_message = "Doctor still has patients assigned"

    def create(self, data: Mapping[str, Any]) -> Doctor:
        require(data, DOCTOR_REQUIRED, DOCTOR_REQUIRED_MSG)
        return self._insert(**{f: clean_text(data.get(f)) for f in DOCTOR_TEXT})

    def update(self, doctor: Doctor, data: Mapping[str, Any]) -> Doctor:
        changes = {f: data[f] for f in DOCTOR_TEXT if f in data}
        require(merged(doctor, changes, DOCTOR_REQUIRED), DOCTOR_REQUIRED, DOCTOR_REQUIRED_MSG)
        return self._save(doctor, {f: clean_text(v) for f, v in changes.items()})
