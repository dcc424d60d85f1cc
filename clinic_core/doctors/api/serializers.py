# clinic_core/doctors/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from clinic_core.common.api.serializers import TimeStampedSerializer, text_field
from clinic_core.doctors.models import Doctor


class DoctorInputSerializer(serializers.Serializer):
    name = text_field()
    address = text_field()
    phone = text_field(max_length=20)
    specialization = text_field()
    hospitalAffiliation = text_field(source="hospital_affiliation")


class DoctorSerializer(TimeStampedSerializer):
    hospitalAffiliation = serializers.CharField(source="hospital_affiliation", read_only=True)

    class Meta:
        model = Doctor
        fields = [
            "id",
            "name",
            "address",
            "phone",
            "specialization",
            "hospitalAffiliation",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields
