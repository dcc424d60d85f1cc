# clinic_core/prescriptions/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view

from clinic_core.common.api.views import ResourceViewSet
from clinic_core.prescriptions.api.filters import PrescriptionFilter
from clinic_core.prescriptions.api.serializers import PrescriptionInputSerializer, PrescriptionSerializer
from clinic_core.prescriptions.models import Prescription


@extend_schema_view(
    create=extend_schema(request=PrescriptionInputSerializer),
    update=extend_schema(request=PrescriptionInputSerializer),
)
@extend_schema(tags=["Prescriptions"])
class PrescriptionViewSet(ResourceViewSet):
    serializer_class = PrescriptionSerializer
    input_serializer_class = PrescriptionInputSerializer
    filterset_class = PrescriptionFilter
    queryset = Prescription.objects.none()
    key_fields = ("rx_id",)

    resource_name = "prescription"
    resource_name_plural = "prescriptions"
