# clinic_core/doctors/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view

from clinic_core.common.api.views import ResourceViewSet
from clinic_core.doctors.api.serializers import DoctorInputSerializer, DoctorSerializer
from clinic_core.doctors.models import Doctor


@extend_schema_view(
    create=extend_schema(request=DoctorInputSerializer),
    update=extend_schema(request=DoctorInputSerializer),
)
@extend_schema(tags=["Doctors"])
class DoctorViewSet(ResourceViewSet):
    serializer_class = DoctorSerializer
    input_serializer_class = DoctorInputSerializer
    queryset = Doctor.objects.none()

    resource_name = "doctor"
    resource_name_plural = "doctors"
