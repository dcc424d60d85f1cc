# clinic_core/doctors/tests/test_doctor_crud.py
import pytest

from clinic_core.doctors.models import Doctor
from clinic_core.tests.helpers import data, error

pytestmark = pytest.mark.django_db

PAYLOAD = {
    "name": "  Dr. Luka Babic ",
    "address": "Frankopanska 3, Rijeka",
    "phone": "098765432",
    "specialization": "Dermatology",
}


def test_doctor_create_trims_and_defaults_affiliation(api_client):
    r = api_client.post("/api/doctors", PAYLOAD, format="json")
    assert r.status_code == 200, r.data
    body = data(r)
    assert body["name"] == "Dr. Luka Babic"
    assert body["hospitalAffiliation"] == ""
    assert body["createdAt"] and body["updatedAt"]
    assert Doctor.objects.filter(pk=body["id"]).exists()


@pytest.mark.parametrize("missing", ["name", "address", "phone", "specialization"])
def test_doctor_create_missing_field_returns_400(api_client, missing):
    payload = {**PAYLOAD, missing: "   "}
    r = api_client.post("/api/doctors", payload, format="json")
    assert r.status_code == 400, r.data
    assert error(r) == "Doctor has to have name, address, phone and specialization"
    assert Doctor.objects.count() == 0


def test_doctor_list_and_retrieve(api_client, doctor, other_doctor):
    r = api_client.get("/api/doctors")
    assert r.status_code == 200, r.data
    assert [d["id"] for d in data(r)] == [doctor.id, other_doctor.id]

    r = api_client.get(f"/api/doctors/{doctor.id}")
    assert r.status_code == 200, r.data
    assert data(r)["specialization"] == "General practice"


def test_doctor_routes_accept_trailing_slash(api_client, doctor):
    assert api_client.get("/api/doctors/").status_code == 200
    assert api_client.get(f"/api/doctors/{doctor.id}/").status_code == 200


def test_doctor_retrieve_missing_returns_404(api_client):
    r = api_client.get("/api/doctors/999")
    assert r.status_code == 404, r.data
    assert error(r) == "Doctor not found"


def test_doctor_retrieve_non_numeric_id_returns_404(api_client):
    r = api_client.get("/api/doctors/abc")
    assert r.status_code == 404, r.data
    assert error(r) == "Doctor not found"


def test_doctor_put_updates_only_supplied_fields(api_client, doctor):
    r = api_client.put(f"/api/doctors/{doctor.id}", {"phone": " 099000111 "}, format="json")
    assert r.status_code == 200, r.data
    body = data(r)
    assert body["phone"] == "099000111"
    assert body["name"] == doctor.name

    doctor.refresh_from_db()
    assert doctor.phone == "099000111"


def test_doctor_patch_behaves_like_put(api_client, doctor):
    r = api_client.patch(
        f"/api/doctors/{doctor.id}",
        {"hospitalAffiliation": "KBC Zagreb"},
        format="json",
    )
    assert r.status_code == 200, r.data
    assert data(r)["hospitalAffiliation"] == "KBC Zagreb"


def test_doctor_update_blanking_required_field_returns_400(api_client, doctor):
    r = api_client.put(f"/api/doctors/{doctor.id}", {"name": ""}, format="json")
    assert r.status_code == 400, r.data
    assert error(r) == "Doctor has to have name, address, phone and specialization"

    doctor.refresh_from_db()
    assert doctor.name == "Dr. Ana Horvat"


def test_doctor_update_missing_returns_404(api_client):
    r = api_client.put("/api/doctors/999", PAYLOAD, format="json")
    assert r.status_code == 404, r.data


def test_doctor_delete_returns_last_values(api_client, other_doctor):
    r = api_client.delete(f"/api/doctors/{other_doctor.id}")
    assert r.status_code == 200, r.data
    assert data(r)["name"] == "Dr. Marko Kovac"
    assert not Doctor.objects.filter(pk=other_doctor.id).exists()

    assert api_client.get(f"/api/doctors/{other_doctor.id}").status_code == 404


def test_doctor_delete_with_patients_returns_409(api_client, doctor, patient):
    r = api_client.delete(f"/api/doctors/{doctor.id}")
    assert r.status_code == 409, r.data
    assert error(r) == "Doctor still has patients assigned"
    assert Doctor.objects.filter(pk=doctor.id).exists()


def test_doctor_malformed_json_returns_400_envelope(api_client):
    r = api_client.generic("POST", "/api/doctors", "{not json", content_type="application/json")
    assert r.status_code == 400
    assert "error" in r.data
