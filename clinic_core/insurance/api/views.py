# clinic_core/insurance/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view

from clinic_core.common.api.views import ResourceViewSet
from clinic_core.insurance.api.serializers import InsuranceCompanyInputSerializer, InsuranceCompanySerializer
from clinic_core.insurance.models import InsuranceCompany


@extend_schema_view(
    create=extend_schema(request=InsuranceCompanyInputSerializer),
    update=extend_schema(request=InsuranceCompanyInputSerializer),
)
@extend_schema(tags=["Insurance"])
class InsuranceCompanyViewSet(ResourceViewSet):
    serializer_class = InsuranceCompanySerializer
    input_serializer_class = InsuranceCompanyInputSerializer
    queryset = InsuranceCompany.objects.none()

    resource_name = "insurance company"
    resource_name_plural = "insurance companies"
