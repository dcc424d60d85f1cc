# clinic_core/common/tests/test_service_helpers.py
import pytest

from clinic_core.common.api.exceptions import ConflictError, NotFoundError, ValidationError
from clinic_core.common.services import ResourceService, clean_text, is_blank, merged, require
from clinic_core.doctors.selectors import doctor_repository
from clinic_core.doctors.services import DoctorService
from clinic_core.hospitals.selectors import hospital_affiliation_repository


@pytest.mark.parametrize("value, blank", [(None, True), ("", True), ("  ", True), ("x", False), (False, False), (0, False)])
def test_is_blank(value, blank):
    assert is_blank(value) is blank


def test_clean_text():
    assert clean_text("  a b ") == "a b"
    assert clean_text(None) == ""


def test_require_raises_fixed_message():
    with pytest.raises(ValidationError) as exc:
        require({"a": "x", "b": " "}, ("a", "b"), "Need a and b")
    assert str(exc.value.detail) == "Need a and b"


@pytest.mark.django_db
def test_merged_prefers_supplied_values(doctor):
    state = merged(doctor, {"phone": "1"}, ("name", "phone"))
    assert state == {"name": doctor.name, "phone": "1"}


@pytest.mark.django_db
def test_service_get_and_delete_conflict(doctor, patient):
    service = DoctorService(doctor_repository())
    assert service.get(pk=doctor.id) == doctor

    with pytest.raises(NotFoundError):
        service.get(pk=doctor.id + 100)

    with pytest.raises(ConflictError):
        service.delete(doctor)


@pytest.mark.django_db
def test_repository_loads_relations_eagerly(doctor, hospital, django_assert_num_queries):
    repo = hospital_affiliation_repository()
    repo.insert(doctor=doctor, hospital=hospital)

    with django_assert_num_queries(1):
        rows = list(repo.find())
        assert rows[0].doctor.name == doctor.name
        assert rows[0].hospital.name == hospital.name


def test_resource_service_requires_create_and_update():
    with pytest.raises(TypeError):
        ResourceService(doctor_repository())
