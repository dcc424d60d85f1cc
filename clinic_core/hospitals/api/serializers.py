# clinic_core/hospitals/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from clinic_core.common.api.serializers import TimeStampedSerializer, id_field, text_field
from clinic_core.doctors.api.serializers import DoctorSerializer
from clinic_core.hospitals.models import Hospital, HospitalAffiliation


class HospitalInputSerializer(serializers.Serializer):
    name = text_field()
    address = text_field()
    phone = text_field(max_length=20)


class HospitalSerializer(TimeStampedSerializer):
    class Meta:
        model = Hospital
        fields = ["id", "name", "address", "phone", "createdAt", "updatedAt"]
        read_only_fields = fields


class HospitalAffiliationInputSerializer(serializers.Serializer):
    doctorId = id_field(source="doctor_id")
    hospitalId = id_field(source="hospital_id")
    affiliationDate = serializers.DateTimeField(source="affiliation_date", required=False, allow_null=True)


class HospitalAffiliationSerializer(TimeStampedSerializer):
    doctorId = serializers.IntegerField(source="doctor_id", read_only=True)
    hospitalId = serializers.IntegerField(source="hospital_id", read_only=True)
    affiliationDate = serializers.DateTimeField(source="affiliation_date", read_only=True)
    doctor = DoctorSerializer(read_only=True)
    hospital = HospitalSerializer(read_only=True)

    class Meta:
        model = HospitalAffiliation
        fields = [
            "doctorId",
            "hospitalId",
            "affiliationDate",
            "createdAt",
            "updatedAt",
            "doctor",
            "hospital",
        ]
        read_only_fields = fields
