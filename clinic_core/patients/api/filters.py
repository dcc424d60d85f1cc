# clinic_core/patients/api/filters.py
from __future__ import annotations

import django_filters

from clinic_core.patients.models import DoctorHistory, Patient, PatientRelationship


class PatientFilter(django_filters.FilterSet):
    doctorId = django_filters.NumberFilter(field_name="doctor_id")
    insuranceId = django_filters.NumberFilter(field_name="insurance_company_id")
    insuranceOwnerId = django_filters.NumberFilter(field_name="insurance_owner_id")
    relationship = django_filters.ChoiceFilter(choices=PatientRelationship.choices)

    class Meta:
        model = Patient
        fields = []


class DoctorHistoryFilter(django_filters.FilterSet):
    doctorId = django_filters.NumberFilter(field_name="doctor_id")
    patientId = django_filters.NumberFilter(field_name="patient_id")

    class Meta:
        model = DoctorHistory
        fields = []
