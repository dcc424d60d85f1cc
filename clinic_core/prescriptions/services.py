# clinic_core/prescriptions/services.py
from __future__ import annotations

from typing import Any, Mapping

from clinic_core.common.api.exceptions import ValidationError
from clinic_core.common.repository import Repository
from clinic_core.common.services import ResourceService, clean_text, merged, require, resolve
from clinic_core.prescriptions.models import Prescription

PRESCRIPTION_REQUIRED = (
    "date_prescribed",
    "dosage",
    "duration",
    "refillable",
    "patient_id",
    "doctor_id",
    "drug_id",
)
PRESCRIPTION_REQUIRED_MSG = (
    "Prescription has to have date prescribed, dosage, duration, refillability, patient ID, doctor ID and drug ID"
)
REFILLS_REQUIRED_MSG = "Refillable prescription has to have number of refills"

PRESCRIPTION_FIELDS = (*PRESCRIPTION_REQUIRED, "refill_no", "comments", "non_refill_reason")
TEXT_FIELDS = ("dosage", "comments", "non_refill_reason")


def _check_refills(state: Mapping[str, Any]) -> None:
    if state["refillable"] and not state.get("refill_no"):
        raise ValidationError(REFILLS_REQUIRED_MSG)


class PrescriptionService(ResourceService):
    name = "prescription"
    not_found_message = "Prescription not found"

    def __init__(self, repository: Repository, *, patients: Repository, doctors: Repository, drugs: Repository):
        super().__init__(repository)
        self.patients = patients
        self.doctors = doctors
        self.drugs = drugs

    def _relations(self, data: Mapping[str, Any]) -> dict[str, Any]:
        out = {}
        if "patient_id" in data:
            out["patient"] = resolve(self.patients, data["patient_id"], "Patient with given ID not found")
        if "doctor_id" in data:
            out["doctor"] = resolve(self.doctors, data["doctor_id"], "Doctor with given ID not found")
        if "drug_id" in data:
            out["drug"] = resolve(self.drugs, data["drug_id"], "Drug with given ID not found")
        return out

    def create(self, data: Mapping[str, Any]) -> Prescription:
        require(data, PRESCRIPTION_REQUIRED, PRESCRIPTION_REQUIRED_MSG)
        _check_refills(data)

        return self._insert(
            date_prescribed=data["date_prescribed"],
            duration=data["duration"],
            refillable=data["refillable"],
            refill_no=data.get("refill_no"),
            **{f: clean_text(data.get(f)) for f in TEXT_FIELDS},
            **self._relations(data),
        )

    def update(self, prescription: Prescription, data: Mapping[str, Any]) -> Prescription:
        supplied = {f: data[f] for f in PRESCRIPTION_FIELDS if f in data}
        state = merged(prescription, supplied, PRESCRIPTION_FIELDS)
        require(state, PRESCRIPTION_REQUIRED, PRESCRIPTION_REQUIRED_MSG)
        _check_refills(state)

        changes = {f: v for f, v in supplied.items() if not f.endswith("_id")}
        for f in TEXT_FIELDS:
            if f in changes:
                changes[f] = clean_text(changes[f])
        changes.update(self._relations(supplied))
        return self._save(prescription, changes)
