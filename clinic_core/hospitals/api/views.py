# clinic_core/hospitals/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view

from clinic_core.common.api.views import ResourceViewSet
from clinic_core.hospitals.api.filters import HospitalAffiliationFilter
from clinic_core.hospitals.api.serializers import (
    HospitalAffiliationInputSerializer,
    HospitalAffiliationSerializer,
    HospitalInputSerializer,
    HospitalSerializer,
)
from clinic_core.hospitals.models import Hospital, HospitalAffiliation


@extend_schema_view(
    create=extend_schema(request=HospitalInputSerializer),
    update=extend_schema(request=HospitalInputSerializer),
)
@extend_schema(tags=["Hospitals"])
class HospitalViewSet(ResourceViewSet):
    serializer_class = HospitalSerializer
    input_serializer_class = HospitalInputSerializer
    queryset = Hospital.objects.none()

    resource_name = "hospital"
    resource_name_plural = "hospitals"


@extend_schema_view(
    create=extend_schema(request=HospitalAffiliationInputSerializer),
    update=extend_schema(request=HospitalAffiliationInputSerializer),
)
@extend_schema(tags=["Hospitals"])
class HospitalAffiliationViewSet(ResourceViewSet):
    serializer_class = HospitalAffiliationSerializer
    input_serializer_class = HospitalAffiliationInputSerializer
    filterset_class = HospitalAffiliationFilter
    queryset = HospitalAffiliation.objects.none()
    key_fields = ("doctor_id", "hospital_id")

    resource_name = "hospital affiliation"
    resource_name_plural = "hospital affiliations"
