# clinic_core/conftest.py
import pytest
from rest_framework.test import APIClient

from clinic_core.doctors.models import Doctor
from clinic_core.drugs.models import Drug
from clinic_core.hospitals.models import Hospital
from clinic_core.insurance.models import InsuranceCompany
from clinic_core.patients.models import Patient, PatientRelationship


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def doctor(db):
    return Doctor.objects.create(
        name="Dr. Ana Horvat",
        address="Ilica 1, Zagreb",
        phone="091111222",
        specialization="General practice",
    )


@pytest.fixture
def other_doctor(db):
    return Doctor.objects.create(
        name="Dr. Marko Kovac",
        address="Vukovarska 10, Split",
        phone="092333444",
        specialization="Cardiology",
    )


@pytest.fixture
def insurance_company(db):
    return InsuranceCompany.objects.create(name="HZZO", phone="014806333")


@pytest.fixture
def patient(db, doctor, insurance_company):
    """An insurance owner assigned to `doctor`."""
    return Patient.objects.create(
        name="Ivana Peric",
        address="Savska 5, Zagreb",
        phone="095555666",
        email="ivana@example.com",
        relationship=PatientRelationship.INSURANCE_OWNER,
        doctor=doctor,
        insurance_company=insurance_company,
    )


@pytest.fixture
def hospital(db):
    return Hospital.objects.create(name="KBC Zagreb", address="Kispaticeva 12", phone="012388888")


@pytest.fixture
def drug(db):
    return Drug.objects.create(drug_name="Ibuprofen", side_effects="Nausea", benefits="Pain relief")
