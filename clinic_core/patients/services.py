# clinic_core/patients/services.py
from __future__ import annotations

from typing import Any, Mapping

from clinic_core.common.api.exceptions import ValidationError
from clinic_core.common.repository import Repository
from clinic_core.common.services import ResourceService, clean_text, merged, require, resolve
from clinic_core.patients.models import DoctorHistory, Patient, PatientRelationship

PATIENT_TEXT = ("name", "address", "phone", "email", "relationship")
PATIENT_REQUIRED = (*PATIENT_TEXT, "doctor_id", "insurance_company_id")
PATIENT_REQUIRED_MSG = (
    "Patient has to have name, address, phone, email, relationship, doctor ID and insurance ID"
)
INVALID_RELATIONSHIP_MSG = "Invalid relationship type"
OWNER_REQUIRED_MSG = "Insurance owner ID is required for dependent patients"
OWNER_SELF_MSG = "Patient can not be their own insurance owner"
OWNER_NOT_OWNER_MSG = "Insurance owner has to be an insurance owner patient"
OWNER_HAS_DEPENDENTS_MSG = "Patient with dependents has to stay an insurance owner"

HISTORY_REQUIRED_MSG = "Doctor history has to have doctor ID, patient ID and start date"
HISTORY_START_MSG = "Doctor history has to have a start date"
HISTORY_ORDER_MSG = "End date can not be before start date"
HISTORY_DUPLICATE_MSG = "Doctor history already exists"


class PatientService(ResourceService):
    name = "patient"
    not_found_message = "Patient not found"
    delete_conflict_message = "Patient is still the insurance owner of other patients"

    def __init__(self, repository: Repository, *, doctors: Repository, insurers: Repository):
        super().__init__(repository)
        self.doctors = doctors
        self.insurers = insurers

    def _check_relationship(self, state: Mapping[str, Any]) -> None:
        relationship = clean_text(state["relationship"])
        if relationship not in PatientRelationship.values:
            raise ValidationError(INVALID_RELATIONSHIP_MSG)
        if relationship == PatientRelationship.DEPENDENT and state.get("insurance_owner_id") is None:
            raise ValidationError(OWNER_REQUIRED_MSG)

    def _resolve_owner(self, owner_id: int) -> Patient:
        owner = resolve(self.repository, owner_id, "Insurance owner with given ID not found")
        # policies are one level deep: a dependent can not hold one
        if owner.relationship != PatientRelationship.INSURANCE_OWNER:
            raise ValidationError(OWNER_NOT_OWNER_MSG)
        return owner

    def create(self, data: Mapping[str, Any]) -> Patient:
        require(data, PATIENT_REQUIRED, PATIENT_REQUIRED_MSG)
        self._check_relationship(data)

        relationship = clean_text(data["relationship"])
        owner = None
        if relationship == PatientRelationship.DEPENDENT:
            owner = self._resolve_owner(data["insurance_owner_id"])

        doctor = resolve(self.doctors, data["doctor_id"], "Doctor with given ID not found")
        insurer = resolve(self.insurers, data["insurance_company_id"], "Insurance company with given ID not found")

        return self._insert(
            **{f: clean_text(data[f]) for f in PATIENT_TEXT},
            doctor=doctor,
            insurance_company=insurer,
            insurance_owner=owner,
        )

    def update(self, patient: Patient, data: Mapping[str, Any]) -> Patient:
        fields = (*PATIENT_REQUIRED, "insurance_owner_id")
        supplied = {f: data[f] for f in fields if f in data}
        state = merged(patient, supplied, fields)
        require(state, PATIENT_REQUIRED, PATIENT_REQUIRED_MSG)
        self._check_relationship(state)

        changes: dict[str, Any] = {f: clean_text(supplied[f]) for f in PATIENT_TEXT if f in supplied}

        if clean_text(state["relationship"]) == PatientRelationship.INSURANCE_OWNER:
            changes["insurance_owner"] = None
        elif patient.dependents.exists():
            raise ValidationError(OWNER_HAS_DEPENDENTS_MSG)
        elif "insurance_owner_id" in supplied:
            if supplied["insurance_owner_id"] == patient.pk:
                raise ValidationError(OWNER_SELF_MSG)
            changes["insurance_owner"] = self._resolve_owner(supplied["insurance_owner_id"])

        if "doctor_id" in supplied:
            changes["doctor"] = resolve(self.doctors, supplied["doctor_id"], "Doctor with given ID not found")
        if "insurance_company_id" in supplied:
            changes["insurance_company"] = resolve(
                self.insurers, supplied["insurance_company_id"], "Insurance company with given ID not found"
            )

        return self._save(patient, changes)


def _check_period(start, end) -> None:
    if start is not None and end is not None and start > end:
        raise ValidationError(HISTORY_ORDER_MSG)


class DoctorHistoryService(ResourceService):
    name = "doctor history"
    not_found_message = "Doctor history not found"

    def __init__(self, repository: Repository, *, doctors: Repository, patients: Repository):
        super().__init__(repository)
        self.doctors = doctors
        self.patients = patients

    def create(self, data: Mapping[str, Any]) -> DoctorHistory:
        require(data, ("doctor_id", "patient_id", "start_date"), HISTORY_REQUIRED_MSG)
        _check_period(data["start_date"], data.get("end_date"))

        doctor = resolve(self.doctors, data["doctor_id"], "Doctor with given ID not found")
        patient = resolve(self.patients, data["patient_id"], "Patient with given ID not found")

        if self.repository.exists(doctor=doctor, patient=patient):
            raise ValidationError(HISTORY_DUPLICATE_MSG)

        return self._insert(
            HISTORY_DUPLICATE_MSG,
            doctor=doctor,
            patient=patient,
            start_date=data["start_date"],
            end_date=data.get("end_date"),
            reason_for_leaving=clean_text(data.get("reason_for_leaving")),
        )

    def update(self, history: DoctorHistory, data: Mapping[str, Any]) -> DoctorHistory:
        # (doctor, patient) is the key and comes from the path
        changes = {f: data[f] for f in ("start_date", "end_date", "reason_for_leaving") if f in data}
        state = merged(history, changes, ("start_date", "end_date"))
        require(state, ("start_date",), HISTORY_START_MSG)
        _check_period(state["start_date"], state["end_date"])

        if "reason_for_leaving" in changes:
            changes["reason_for_leaving"] = clean_text(changes["reason_for_leaving"])
        return self._save(history, changes)
