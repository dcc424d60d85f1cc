# clinic_core/drugs/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from clinic_core.common.api.serializers import TimeStampedSerializer, text_field
from clinic_core.drugs.models import Drug


class DrugInputSerializer(serializers.Serializer):
    drugName = text_field(source="drug_name")
    sideEffects = text_field(source="side_effects")
    benefits = text_field()


class DrugSerializer(TimeStampedSerializer):
    drugName = serializers.CharField(source="drug_name", read_only=True)
    sideEffects = serializers.CharField(source="side_effects", read_only=True)

    class Meta:
        model = Drug
        fields = ["id", "drugName", "sideEffects", "benefits", "createdAt", "updatedAt"]
        read_only_fields = fields
