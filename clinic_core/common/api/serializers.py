# clinic_core/common/api/serializers.py
from __future__ import annotations

from rest_framework import serializers


class TimeStampedSerializer(serializers.ModelSerializer):
    """Exposes the system-managed timestamps under their camelCase names."""
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)


def text_field(**kwargs) -> serializers.CharField:
    """
    Optional, trimmed string input. Presence rules are enforced by the
    services so each resource can report its own fixed message.
    """
    kwargs.setdefault("max_length", 255)
    return serializers.CharField(required=False, allow_blank=True, allow_null=True, **kwargs)


def id_field(**kwargs) -> serializers.IntegerField:
    return serializers.IntegerField(required=False, allow_null=True, **kwargs)
