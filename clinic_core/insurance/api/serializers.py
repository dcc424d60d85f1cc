# clinic_core/insurance/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from clinic_core.common.api.serializers import TimeStampedSerializer, text_field
from clinic_core.insurance.models import InsuranceCompany


class InsuranceCompanyInputSerializer(serializers.Serializer):
    name = text_field()
    phone = text_field(max_length=20)


class InsuranceCompanySerializer(TimeStampedSerializer):
    class Meta:
        model = InsuranceCompany
        fields = ["id", "name", "phone", "createdAt", "updatedAt"]
        read_only_fields = fields
