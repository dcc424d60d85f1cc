# clinic_core/drugs/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view

from clinic_core.common.api.views import ResourceViewSet
from clinic_core.drugs.api.serializers import DrugInputSerializer, DrugSerializer
from clinic_core.drugs.models import Drug


@extend_schema_view(
    create=extend_schema(request=DrugInputSerializer),
    update=extend_schema(request=DrugInputSerializer),
)
@extend_schema(tags=["Drugs"])
class DrugViewSet(ResourceViewSet):
    serializer_class = DrugSerializer
    input_serializer_class = DrugInputSerializer
    queryset = Drug.objects.none()

    resource_name = "drug"
    resource_name_plural = "drugs"
