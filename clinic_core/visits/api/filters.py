# clinic_core/visits/api/filters.py
from __future__ import annotations

import django_filters

from clinic_core.visits.models import OfficeVisit


class OfficeVisitFilter(django_filters.FilterSet):
    patientId = django_filters.NumberFilter(field_name="patient_id")
    doctorId = django_filters.NumberFilter(field_name="doctor_id")

    class Meta:
        model = OfficeVisit
        fields = []
