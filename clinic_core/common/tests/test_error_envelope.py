# clinic_core/common/tests/test_error_envelope.py
from unittest import mock

import pytest
from django.db import DatabaseError
from rest_framework.exceptions import ErrorDetail

from clinic_core.common.api.exceptions import GENERIC_SERVER_ERROR, StorageError, api_exception_handler, flatten_detail
from clinic_core.doctors.services import DoctorService
from clinic_core.visits.services import OfficeVisitService

pytestmark = pytest.mark.django_db


def test_storage_failure_on_list_returns_generic_500(api_client):
    with mock.patch.object(DoctorService, "find", side_effect=DatabaseError("connection lost")):
        with mock.patch("clinic_core.common.api.exceptions.logger") as logger:
            r = api_client.get("/api/doctors")

    assert r.status_code == 500
    assert r.data == {"message": "Could not fetch doctors"}
    assert logger.error.called
    assert "connection lost" not in str(r.data)


def test_storage_failure_on_create_names_the_resource(api_client, patient, doctor):
    with mock.patch.object(OfficeVisitService, "create", side_effect=DatabaseError("disk full")):
        r = api_client.post(
            "/api/officeVisits",
            {"patientId": patient.id, "doctorId": doctor.id, "visitDate": "2024-01-01T00:00:00Z"},
            format="json",
        )

    assert r.status_code == 500
    assert r.data == {"message": "Could not create office visit"}


def test_storage_failure_on_delete(api_client, doctor):
    with mock.patch.object(DoctorService, "delete", side_effect=DatabaseError("locked")):
        r = api_client.delete(f"/api/doctors/{doctor.id}")

    assert r.status_code == 500
    assert r.data == {"message": "Could not delete doctor"}


def test_method_not_allowed_uses_error_envelope(api_client):
    r = api_client.delete("/api/doctors")
    assert r.status_code == 405
    assert "error" in r.data


def test_flatten_detail_joins_field_errors():
    detail = {
        "doctorId": [ErrorDetail("A valid integer is required.")],
        "non_field_errors": [ErrorDetail("Bad input.")],
    }
    assert flatten_detail(detail) == "doctorId: A valid integer is required.; Bad input."
    assert flatten_detail({"detail": ErrorDetail("Doctor not found")}) == "Doctor not found"


def test_storage_error_outside_a_view_uses_generic_message():
    with mock.patch("clinic_core.common.api.exceptions.logger"):
        response = api_exception_handler(StorageError(), {})

    assert response.status_code == 500
    assert response.data == {"message": GENERIC_SERVER_ERROR}


@pytest.mark.parametrize("path", ["/api/officeVisits/1/2", "/api/doctors/1/extra", "/api/nurses"])
def test_unknown_api_route_returns_json_404(api_client, path):
    r = api_client.get(path)
    assert r.status_code == 404
    assert r["Content-Type"].startswith("application/json")
    assert r.json() == {"error": "Not found"}


def test_unknown_api_route_rejects_every_method_with_404(api_client):
    r = api_client.post("/api/nurses", {"name": "x"}, format="json")
    assert r.status_code == 404
    assert r.json() == {"error": "Not found"}


def test_path_outside_api_returns_json_404(api_client):
    r = api_client.get("/nowhere/")
    assert r.status_code == 404
    assert r["Content-Type"].startswith("application/json")
    assert r.json() == {"error": "Not found"}
