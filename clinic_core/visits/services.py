# clinic_core/visits/services.py
from __future__ import annotations

from typing import Any, Mapping

from clinic_core.common.api.exceptions import ValidationError
from clinic_core.common.repository import Repository
from clinic_core.common.services import ResourceService, clean_text, is_blank, merged, require, resolve
from clinic_core.visits.models import OfficeVisit

VISIT_REQUIRED_MSG = "Office visit has to have at least doctor ID, patient ID and date of visit"
VISIT_KIND_MSG = "Visit has to be either initial visit, follow-up visit, routine visit or other visit"
VISIT_DUPLICATE_MSG = "Visit already exists"

VISIT_FLAGS = ("initial_visit", "followup_visit", "routine_visit", "other_visit")
VISIT_TEXT = ("symptoms", "initial_diagnosis", "diagnosis_status", "blood_pressure", "diagnosis")
VISIT_FIELDS = (*VISIT_FLAGS, *VISIT_TEXT, "height", "weight")


def check_visit_kind(state: Mapping[str, Any]) -> None:
    """Exactly one kind flag must be set, and that kind's findings must be present."""
    kinds = [flag for flag in VISIT_FLAGS if state.get(flag)]
    if len(kinds) != 1:
        raise ValidationError(VISIT_KIND_MSG)

    kind = kinds[0]
    if kind == "initial_visit" and is_blank(state.get("initial_diagnosis")):
        raise ValidationError("Missing initial diagnosis")
    if kind == "followup_visit" and is_blank(state.get("diagnosis_status")):
        raise ValidationError("Missing diagnosis status")
    if kind == "routine_visit" and (
        is_blank(state.get("blood_pressure")) or not state.get("height") or not state.get("weight")
    ):
        raise ValidationError("Missing blood pressure, height or weight")


class OfficeVisitService(ResourceService):
    name = "office visit"
    not_found_message = "Office visit not found"

    def __init__(self, repository: Repository, *, patients: Repository, doctors: Repository):
        super().__init__(repository)
        self.patients = patients
        self.doctors = doctors

    def create(self, data: Mapping[str, Any]) -> OfficeVisit:
        require(data, ("doctor_id", "patient_id", "visit_date"), VISIT_REQUIRED_MSG)
        check_visit_kind(data)

        doctor = resolve(self.doctors, data["doctor_id"], "Doctor with given ID not found")
        patient = resolve(self.patients, data["patient_id"], "Patient with given ID not found")

        if self.repository.exists(patient=patient, doctor=doctor, visit_date=data["visit_date"]):
            raise ValidationError(VISIT_DUPLICATE_MSG)

        return self._insert(
            VISIT_DUPLICATE_MSG,
            patient=patient,
            doctor=doctor,
            visit_date=data["visit_date"],
            height=data.get("height"),
            weight=data.get("weight"),
            **{f: bool(data.get(f)) for f in VISIT_FLAGS},
            **{f: clean_text(data.get(f)) for f in VISIT_TEXT},
        )

    def update(self, visit: OfficeVisit, data: Mapping[str, Any]) -> OfficeVisit:
        # (patient, doctor, visit_date) is the key and comes from the path
        changes = {f: data[f] for f in VISIT_FIELDS if f in data}
        for f in VISIT_FLAGS:
            if f in changes:
                changes[f] = bool(changes[f])
        for f in VISIT_TEXT:
            if f in changes:
                changes[f] = clean_text(changes[f])

        check_visit_kind(merged(visit, changes, VISIT_FIELDS))
        return self._save(visit, changes)
