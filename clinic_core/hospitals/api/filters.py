# clinic_core/hospitals/api/filters.py
from __future__ import annotations

import django_filters

from clinic_core.hospitals.models import HospitalAffiliation


class HospitalAffiliationFilter(django_filters.FilterSet):
    doctorId = django_filters.NumberFilter(field_name="doctor_id")
    hospitalId = django_filters.NumberFilter(field_name="hospital_id")

    class Meta:
        model = HospitalAffiliation
        fields = []
