# clinic_core/patients/tests/test_patient_crud.py
import pytest

from clinic_core.patients.models import Patient
from clinic_core.tests.helpers import data, error

pytestmark = pytest.mark.django_db

REQUIRED_MSG = "Patient has to have name, address, phone, email, relationship, doctor ID and insurance ID"


def _payload(doctor, insurance_company, **extra):
    return {
        "name": "Petar Juric",
        "address": "Zvonimirova 20, Zagreb",
        "phone": "091999888",
        "email": "petar@example.com",
        "relationship": "insuranceOwner",
        "doctorId": doctor.id,
        "insuranceId": insurance_company.id,
        **extra,
    }


def test_patient_create_owner_embeds_relations(api_client, doctor, insurance_company):
    r = api_client.post("/api/patients", _payload(doctor, insurance_company), format="json")
    assert r.status_code == 200, r.data
    body = data(r)
    assert body["relationship"] == "insuranceOwner"
    assert body["insuranceOwnerId"] is None
    assert body["doctor"]["id"] == doctor.id
    assert body["insuranceCompany"]["name"] == "HZZO"
    assert body["insuranceOwner"] is None


def test_patient_owner_ignores_supplied_owner_id(api_client, doctor, insurance_company, patient):
    r = api_client.post(
        "/api/patients",
        _payload(doctor, insurance_company, insuranceOwnerId=patient.id),
        format="json",
    )
    assert r.status_code == 200, r.data
    assert data(r)["insuranceOwnerId"] is None


def test_patient_create_dependent(api_client, doctor, insurance_company, patient):
    r = api_client.post(
        "/api/patients",
        _payload(doctor, insurance_company, relationship="dependent", insuranceOwnerId=patient.id),
        format="json",
    )
    assert r.status_code == 200, r.data
    body = data(r)
    assert body["insuranceOwnerId"] == patient.id
    assert body["insuranceOwner"]["name"] == patient.name


@pytest.mark.parametrize("missing", ["name", "email", "relationship", "doctorId", "insuranceId"])
def test_patient_create_missing_field_returns_400(api_client, doctor, insurance_company, missing):
    payload = _payload(doctor, insurance_company)
    del payload[missing]
    r = api_client.post("/api/patients", payload, format="json")
    assert r.status_code == 400, r.data
    assert error(r) == REQUIRED_MSG


def test_patient_create_invalid_relationship(api_client, doctor, insurance_company):
    r = api_client.post("/api/patients", _payload(doctor, insurance_company, relationship="spouse"), format="json")
    assert r.status_code == 400, r.data
    assert error(r) == "Invalid relationship type"


def test_patient_dependent_without_owner(api_client, doctor, insurance_company):
    r = api_client.post("/api/patients", _payload(doctor, insurance_company, relationship="dependent"), format="json")
    assert r.status_code == 400, r.data
    assert error(r) == "Insurance owner ID is required for dependent patients"


def test_patient_dependent_with_unknown_owner(api_client, doctor, insurance_company):
    r = api_client.post(
        "/api/patients",
        _payload(doctor, insurance_company, relationship="dependent", insuranceOwnerId=999),
        format="json",
    )
    assert r.status_code == 400, r.data
    assert error(r) == "Insurance owner with given ID not found"


def test_patient_unknown_doctor_and_insurer(api_client, doctor, insurance_company):
    r = api_client.post("/api/patients", _payload(doctor, insurance_company, doctorId=999), format="json")
    assert r.status_code == 400
    assert error(r) == "Doctor with given ID not found"

    r = api_client.post("/api/patients", _payload(doctor, insurance_company, insuranceId=999), format="json")
    assert r.status_code == 400
    assert error(r) == "Insurance company with given ID not found"
    assert not Patient.objects.exists()


def test_patient_update_switch_doctor(api_client, patient, other_doctor):
    r = api_client.put(f"/api/patients/{patient.id}", {"doctorId": other_doctor.id}, format="json")
    assert r.status_code == 200, r.data
    assert data(r)["doctorId"] == other_doctor.id
    assert data(r)["doctor"]["name"] == other_doctor.name


def test_patient_update_to_dependent_requires_owner(api_client, patient):
    r = api_client.patch(f"/api/patients/{patient.id}", {"relationship": "dependent"}, format="json")
    assert r.status_code == 400, r.data
    assert error(r) == "Insurance owner ID is required for dependent patients"


def test_patient_can_not_own_itself(api_client, patient):
    r = api_client.put(
        f"/api/patients/{patient.id}",
        {"relationship": "dependent", "insuranceOwnerId": patient.id},
        format="json",
    )
    assert r.status_code == 400, r.data
    assert error(r) == "Patient can not be their own insurance owner"


def test_patient_dependent_becoming_owner_drops_owner(api_client, doctor, insurance_company, patient):
    dependent = Patient.objects.create(
        name="Lana Peric",
        address="Savska 5, Zagreb",
        phone="095555667",
        email="lana@example.com",
        relationship="dependent",
        doctor=doctor,
        insurance_company=insurance_company,
        insurance_owner=patient,
    )
    r = api_client.put(f"/api/patients/{dependent.id}", {"relationship": "insuranceOwner"}, format="json")
    assert r.status_code == 200, r.data
    assert data(r)["insuranceOwnerId"] is None


def test_patient_delete_owner_with_dependents_returns_409(api_client, doctor, insurance_company, patient):
    Patient.objects.create(
        name="Lana Peric",
        address="Savska 5, Zagreb",
        phone="095555667",
        email="lana@example.com",
        relationship="dependent",
        doctor=doctor,
        insurance_company=insurance_company,
        insurance_owner=patient,
    )
    r = api_client.delete(f"/api/patients/{patient.id}")
    assert r.status_code == 409, r.data
    assert error(r) == "Patient is still the insurance owner of other patients"


def test_patient_delete_and_not_found(api_client, patient):
    r = api_client.delete(f"/api/patients/{patient.id}")
    assert r.status_code == 200, r.data
    assert data(r)["name"] == "Ivana Peric"

    r = api_client.get(f"/api/patients/{patient.id}")
    assert r.status_code == 404
    assert error(r) == "Patient not found"


def test_patient_list_filters(api_client, doctor, other_doctor, insurance_company, patient):
    Patient.objects.create(
        name="Lana Peric",
        address="Savska 5, Zagreb",
        phone="095555667",
        email="lana@example.com",
        relationship="dependent",
        doctor=other_doctor,
        insurance_company=insurance_company,
        insurance_owner=patient,
    )

    r = api_client.get("/api/patients")
    assert len(data(r)) == 2

    r = api_client.get("/api/patients", {"doctorId": doctor.id})
    assert [p["id"] for p in data(r)] == [patient.id]

    r = api_client.get("/api/patients", {"relationship": "dependent"})
    assert [p["name"] for p in data(r)] == ["Lana Peric"]

    r = api_client.get("/api/patients", {"insuranceId": insurance_company.id})
    assert len(data(r)) == 2

    r = api_client.get("/api/patients", {"relationship": "spouse"})
    assert r.status_code == 400
    assert error(r).startswith("relationship:")


def _dependent_of(owner, doctor, insurance_company):
    return Patient.objects.create(
        name="Lana Peric",
        address="Savska 5, Zagreb",
        phone="095555667",
        email="lana@example.com",
        relationship="dependent",
        doctor=doctor,
        insurance_company=insurance_company,
        insurance_owner=owner,
    )


def test_patient_owner_with_dependents_can_not_become_dependent(api_client, doctor, insurance_company, patient):
    dependent = _dependent_of(patient, doctor, insurance_company)

    r = api_client.put(
        f"/api/patients/{patient.id}",
        {"relationship": "dependent", "insuranceOwnerId": dependent.id},
        format="json",
    )
    assert r.status_code == 400, r.data
    assert error(r) == "Patient with dependents has to stay an insurance owner"

    patient.refresh_from_db()
    assert patient.relationship == "insuranceOwner"
    assert patient.insurance_owner_id is None


def test_patient_owner_must_be_insurance_owner(api_client, doctor, insurance_company, patient):
    dependent = _dependent_of(patient, doctor, insurance_company)

    r = api_client.post(
        "/api/patients",
        _payload(doctor, insurance_company, relationship="dependent", insuranceOwnerId=dependent.id),
        format="json",
    )
    assert r.status_code == 400, r.data
    assert error(r) == "Insurance owner has to be an insurance owner patient"
    assert Patient.objects.count() == 2


def test_patient_dependent_can_move_to_another_owner(api_client, doctor, insurance_company, patient):
    dependent = _dependent_of(patient, doctor, insurance_company)
    new_owner = Patient.objects.create(
        name="Ante Peric",
        address="Savska 5, Zagreb",
        phone="095555668",
        email="ante@example.com",
        relationship="insuranceOwner",
        doctor=doctor,
        insurance_company=insurance_company,
    )

    r = api_client.patch(f"/api/patients/{dependent.id}", {"insuranceOwnerId": new_owner.id}, format="json")
    assert r.status_code == 200, r.data
    assert data(r)["insuranceOwnerId"] == new_owner.id
