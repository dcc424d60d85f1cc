# clinic_core/common/api/views.py
from __future__ import annotations

from typing import Any

from django.http import JsonResponse
from django.urls import re_path
from rest_framework import status, viewsets
from rest_framework.response import Response
from rest_framework.views import APIView

from clinic_core.common.api.exceptions import NotFoundError
from clinic_core.common.services import ResourceService


def ok(data: Any) -> Response:
    return Response({"data": data}, status=status.HTTP_200_OK)


NOT_FOUND_MESSAGE = "Not found"


class UnknownRouteView(APIView):
    """Last route under /api/: any path no resource matched gets the JSON 404 envelope."""

    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        raise NotFoundError(NOT_FOUND_MESSAGE)


def not_found(request, exception=None):
    """handler404 for paths outside /api/."""
    return JsonResponse({"error": NOT_FOUND_MESSAGE}, status=status.HTTP_404_NOT_FOUND)


class ResourceViewSet(viewsets.GenericViewSet):
    """
    Base ViewSet implementing list / retrieve / create / update / destroy
    for one resource on top of a ResourceService.

    Subclasses declare:
      - serializer_class: output representation (with eager relations)
      - input_serializer_class: request body contract (every field optional)
      - key_fields: path kwargs forming the key, in URL order
      - filterset_class (optional): django-filter FilterSet for list
      - resource_name / resource_name_plural: used in 500 messages

    The service is injected at URL composition time via as_view(service=...).
    """
    service: ResourceService | None = None
    input_serializer_class = None
    filterset_class = None
    key_fields: tuple[str, ...] = ("pk",)
    resource_name = "record"
    resource_name_plural = "records"

    _verbs = {
        "list": "fetch",
        "retrieve": "fetch",
        "create": "create",
        "update": "update",
        "destroy": "delete",
    }

    def storage_error_message(self) -> str:
        action = getattr(self, "action", None)
        noun = self.resource_name_plural if action == "list" else self.resource_name
        return f"Could not {self._verbs.get(action, 'process')} {noun}"

    # key parsing

    def parse_key(self, kwargs: dict[str, str]) -> dict[str, Any]:
        """
        Convert raw path segments into ORM lookups. Integer keys by default;
        override for non-integer key parts. A segment that cannot be parsed
        can never match a row, so it is reported as not found.
        """
        try:
            return {field: int(kwargs[field]) for field in self.key_fields}
        except (KeyError, TypeError, ValueError):
            raise NotFoundError(self.service.not_found_message)

    def get_instance(self, kwargs: dict[str, str]):
        return self.service.get(**self.parse_key(kwargs))

    def read_input(self, request) -> dict[str, Any]:
        ser = self.input_serializer_class(data=request.data)
        ser.is_valid(raise_exception=True)
        return dict(ser.validated_data)

    # handlers

    def get_queryset(self):
        return self.service.find()

    def list(self, request, *args, **kwargs):
        # DjangoFilterBackend raises a 400 for malformed filter values
        qs = self.filter_queryset(self.get_queryset())
        return ok(self.get_serializer(qs, many=True).data)

    def retrieve(self, request, *args, **kwargs):
        return ok(self.get_serializer(self.get_instance(kwargs)).data)

    def create(self, request, *args, **kwargs):
        obj = self.service.create(self.read_input(request))
        return ok(self.get_serializer(obj).data)

    def update(self, request, *args, **kwargs):
        instance = self.get_instance(kwargs)
        obj = self.service.update(instance, self.read_input(request))
        return ok(self.get_serializer(obj).data)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_instance(kwargs)
        # snapshot before the row (and its pk) disappear
        data = self.get_serializer(instance).data
        self.service.delete(instance)
        return ok(data)


def resource_urls(prefix: str, viewset: type[ResourceViewSet], *, key: str, service: ResourceService, name: str):
    """
    Collection + detail routes for one resource. `key` is the regex for the
    detail segments, e.g. r"(?P<pk>\\d+)" or r"(?P<doctor_id>[^/]+)/(?P<hospital_id>[^/]+)".
    Trailing slash optional.
    """
    collection = viewset.as_view({"get": "list", "post": "create"}, service=service)
    detail = viewset.as_view(
        {"get": "retrieve", "put": "update", "patch": "update", "delete": "destroy"},
        service=service,
    )
    return [
        re_path(rf"^{prefix}/?$", collection, name=f"{name}-list"),
        re_path(rf"^{prefix}/{key}/?$", detail, name=f"{name}-detail"),
    ]
