# clinic_core/visits/api/views.py
from __future__ import annotations

from datetime import datetime, timezone as dt_timezone
from typing import Any

from django.utils import timezone
from django.utils.dateparse import parse_datetime
from drf_spectacular.utils import extend_schema, extend_schema_view

from clinic_core.common.api.exceptions import NotFoundError
from clinic_core.common.api.views import ResourceViewSet
from clinic_core.visits.api.filters import OfficeVisitFilter
from clinic_core.visits.api.serializers import OfficeVisitInputSerializer, OfficeVisitSerializer
from clinic_core.visits.models import OfficeVisit


def parse_visit_date(raw: str) -> datetime | None:
    """
    ISO-8601 date-time or bare date. parse_datetime reads a bare date as
    midnight, and naive values are read as UTC.
    """
    try:
        value = parse_datetime(raw)
    except ValueError:
        return None
    if value is None:
        return None
    if timezone.is_naive(value):
        value = timezone.make_aware(value, dt_timezone.utc)
    return value


@extend_schema_view(
    create=extend_schema(request=OfficeVisitInputSerializer),
    update=extend_schema(request=OfficeVisitInputSerializer),
)
@extend_schema(tags=["Office visits"])
class OfficeVisitViewSet(ResourceViewSet):
    serializer_class = OfficeVisitSerializer
    input_serializer_class = OfficeVisitInputSerializer
    filterset_class = OfficeVisitFilter
    queryset = OfficeVisit.objects.none()
    key_fields = ("patient_id", "doctor_id")

    resource_name = "office visit"
    resource_name_plural = "office visits"

    def parse_key(self, kwargs: dict[str, str]) -> dict[str, Any]:
        key = super().parse_key(kwargs)
        visit_date = parse_visit_date(kwargs.get("visit_date", ""))
        if visit_date is None:
            raise NotFoundError(self.service.not_found_message)
        key["visit_date"] = visit_date
        return key
