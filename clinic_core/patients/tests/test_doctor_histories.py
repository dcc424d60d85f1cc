# clinic_core/patients/tests/test_doctor_histories.py
import pytest

from clinic_core.patients.models import DoctorHistory
from clinic_core.tests.helpers import data, error

pytestmark = pytest.mark.django_db


def _history(api_client, doctor, patient, **extra):
    return api_client.post(
        "/api/doctorhistories",
        {"doctorId": doctor.id, "patientId": patient.id, "startDate": "2020-01-01T00:00:00Z", **extra},
        format="json",
    )


def test_history_create(api_client, doctor, patient):
    r = _history(api_client, doctor, patient, reasonForLeaving="  moved ")
    assert r.status_code == 200, r.data
    body = data(r)
    assert body["doctorId"] == doctor.id
    assert body["patientId"] == patient.id
    assert body["endDate"] is None
    assert body["reasonForLeaving"] == "moved"
    assert body["patient"]["name"] == patient.name


def test_history_requires_start_date(api_client, doctor, patient):
    r = api_client.post("/api/doctorhistories", {"doctorId": doctor.id, "patientId": patient.id}, format="json")
    assert r.status_code == 400, r.data
    assert error(r) == "Doctor history has to have doctor ID, patient ID and start date"


def test_history_end_before_start(api_client, doctor, patient):
    r = _history(api_client, doctor, patient, endDate="2019-01-01T00:00:00Z")
    assert r.status_code == 400, r.data
    assert error(r) == "End date can not be before start date"


def test_history_unknown_patient(api_client, doctor):
    r = api_client.post(
        "/api/doctorhistories",
        {"doctorId": doctor.id, "patientId": 999, "startDate": "2020-01-01T00:00:00Z"},
        format="json",
    )
    assert r.status_code == 400
    assert error(r) == "Patient with given ID not found"


def test_history_duplicate(api_client, doctor, patient):
    assert _history(api_client, doctor, patient).status_code == 200
    r = _history(api_client, doctor, patient)
    assert r.status_code == 400
    assert error(r) == "Doctor history already exists"


def test_history_composite_key_update_and_delete(api_client, doctor, patient):
    _history(api_client, doctor, patient)
    url = f"/api/doctorhistories/{doctor.id}/{patient.id}"

    r = api_client.put(url, {"endDate": "2022-06-30T00:00:00Z", "reasonForLeaving": "Retired"}, format="json")
    assert r.status_code == 200, r.data
    assert data(r)["endDate"].startswith("2022-06-30")
    assert data(r)["startDate"].startswith("2020-01-01")

    r = api_client.put(url, {"startDate": None}, format="json")
    assert r.status_code == 400
    assert error(r) == "Doctor history has to have a start date"

    r = api_client.put(url, {"startDate": "2023-01-01T00:00:00Z"}, format="json")
    assert r.status_code == 400
    assert error(r) == "End date can not be before start date"

    r = api_client.delete(url)
    assert r.status_code == 200
    assert not DoctorHistory.objects.exists()
    assert api_client.get(url).status_code == 404


def test_history_filters(api_client, doctor, other_doctor, patient):
    _history(api_client, doctor, patient)
    _history(api_client, other_doctor, patient)

    r = api_client.get("/api/doctorhistories", {"doctorId": doctor.id})
    assert [h["doctorId"] for h in data(r)] == [doctor.id]

    r = api_client.get("/api/doctorhistories", {"patientId": patient.id})
    assert len(data(r)) == 2


def test_history_removed_with_patient(api_client, doctor, patient):
    _history(api_client, doctor, patient)
    assert api_client.delete(f"/api/patients/{patient.id}").status_code == 200
    assert not DoctorHistory.objects.exists()
