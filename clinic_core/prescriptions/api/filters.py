# clinic_core/prescriptions/api/filters.py
from __future__ import annotations

import django_filters

from clinic_core.prescriptions.models import Prescription


class PrescriptionFilter(django_filters.FilterSet):
    patientId = django_filters.NumberFilter(field_name="patient_id")
    doctorId = django_filters.NumberFilter(field_name="doctor_id")
    drugId = django_filters.NumberFilter(field_name="drug_id")
    refillable = django_filters.BooleanFilter()

    class Meta:
        model = Prescription
        fields = []
