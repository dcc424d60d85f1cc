# clinic_core/api/urls.py
from __future__ import annotations

from django.urls import re_path

from clinic_core.common.api.views import UnknownRouteView, resource_urls
from clinic_core.doctors.api.views import DoctorViewSet
from clinic_core.doctors.selectors import doctor_repository
from clinic_core.doctors.services import DoctorService
from clinic_core.drugs.api.views import DrugViewSet
from clinic_core.drugs.selectors import drug_repository
from clinic_core.drugs.services import DrugService
from clinic_core.hospitals.api.views import HospitalAffiliationViewSet, HospitalViewSet
from clinic_core.hospitals.selectors import hospital_affiliation_repository, hospital_repository
from clinic_core.hospitals.services import HospitalAffiliationService, HospitalService
from clinic_core.insurance.api.views import InsuranceCompanyViewSet
from clinic_core.insurance.selectors import insurance_company_repository
from clinic_core.insurance.services import InsuranceCompanyService
from clinic_core.patients.api.views import DoctorHistoryViewSet, PatientViewSet
from clinic_core.patients.selectors import doctor_history_repository, patient_repository
from clinic_core.patients.services import DoctorHistoryService, PatientService
from clinic_core.prescriptions.api.views import PrescriptionViewSet
from clinic_core.prescriptions.selectors import prescription_repository
from clinic_core.prescriptions.services import PrescriptionService
from clinic_core.visits.api.views import OfficeVisitViewSet
from clinic_core.visits.selectors import office_visit_repository
from clinic_core.visits.services import OfficeVisitService

# Repositories are shared between services that resolve foreign keys through them.
doctors = doctor_repository()
patients = patient_repository()
hospitals = hospital_repository()
drugs = drug_repository()
insurers = insurance_company_repository()

ID = r"(?P<pk>[^/]+)"

urlpatterns = [
    *resource_urls(
        "patients",
        PatientViewSet,
        key=ID,
        service=PatientService(patients, doctors=doctors, insurers=insurers),
        name="patients",
    ),
    *resource_urls("doctors", DoctorViewSet, key=ID, service=DoctorService(doctors), name="doctors"),
    *resource_urls(
        "doctorhistories",
        DoctorHistoryViewSet,
        key=r"(?P<doctor_id>[^/]+)/(?P<patient_id>[^/]+)",
        service=DoctorHistoryService(doctor_history_repository(), doctors=doctors, patients=patients),
        name="doctor-histories",
    ),
    *resource_urls("drugs", DrugViewSet, key=ID, service=DrugService(drugs), name="drugs"),
    *resource_urls(
        "hospitalAffiliations",
        HospitalAffiliationViewSet,
        key=r"(?P<doctor_id>[^/]+)/(?P<hospital_id>[^/]+)",
        service=HospitalAffiliationService(hospital_affiliation_repository(), doctors=doctors, hospitals=hospitals),
        name="hospital-affiliations",
    ),
    *resource_urls("hospitals", HospitalViewSet, key=ID, service=HospitalService(hospitals), name="hospitals"),
    *resource_urls(
        "insuranceCompanies",
        InsuranceCompanyViewSet,
        key=ID,
        service=InsuranceCompanyService(insurers),
        name="insurance-companies",
    ),
    *resource_urls(
        "officeVisits",
        OfficeVisitViewSet,
        key=r"(?P<patient_id>[^/]+)/(?P<doctor_id>[^/]+)/(?P<visit_date>[^/]+)",
        service=OfficeVisitService(office_visit_repository(), patients=patients, doctors=doctors),
        name="office-visits",
    ),
    *resource_urls(
        "prescriptions",
        PrescriptionViewSet,
        key=r"(?P<rx_id>[^/]+)",
        service=PrescriptionService(prescription_repository(), patients=patients, doctors=doctors, drugs=drugs),
        name="prescriptions",
    ),
    # keep last
    re_path(r"^.*$", UnknownRouteView.as_view(), name="unknown-route"),
]
