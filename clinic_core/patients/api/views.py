# clinic_core/patients/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view

from clinic_core.common.api.views import ResourceViewSet
from clinic_core.patients.api.filters import DoctorHistoryFilter, PatientFilter
from clinic_core.patients.api.serializers import (
    DoctorHistoryInputSerializer,
    DoctorHistorySerializer,
    PatientInputSerializer,
    PatientSerializer,
)
from clinic_core.patients.models import DoctorHistory, Patient


@extend_schema_view(
    create=extend_schema(request=PatientInputSerializer),
    update=extend_schema(request=PatientInputSerializer),
)
@extend_schema(tags=["Patients"])
class PatientViewSet(ResourceViewSet):
    serializer_class = PatientSerializer
    input_serializer_class = PatientInputSerializer
    filterset_class = PatientFilter
    queryset = Patient.objects.none()

    resource_name = "patient"
    resource_name_plural = "patients"


@extend_schema_view(
    create=extend_schema(request=DoctorHistoryInputSerializer),
    update=extend_schema(request=DoctorHistoryInputSerializer),
)
@extend_schema(tags=["Doctor histories"])
class DoctorHistoryViewSet(ResourceViewSet):
    serializer_class = DoctorHistorySerializer
    input_serializer_class = DoctorHistoryInputSerializer
    filterset_class = DoctorHistoryFilter
    queryset = DoctorHistory.objects.none()
    key_fields = ("doctor_id", "patient_id")

    resource_name = "doctor history"
    resource_name_plural = "doctor histories"
