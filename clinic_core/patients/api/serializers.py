# clinic_core/patients/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from clinic_core.common.api.serializers import TimeStampedSerializer, id_field, text_field
from clinic_core.doctors.api.serializers import DoctorSerializer
from clinic_core.insurance.api.serializers import InsuranceCompanySerializer
from clinic_core.patients.models import DoctorHistory, Patient


class PatientInputSerializer(serializers.Serializer):
    name = text_field()
    address = text_field()
    phone = text_field(max_length=20)
    email = text_field()
    relationship = text_field(max_length=20)
    doctorId = id_field(source="doctor_id")
    insuranceId = id_field(source="insurance_company_id")
    insuranceOwnerId = id_field(source="insurance_owner_id")


class PatientSummarySerializer(TimeStampedSerializer):
    """Flat patient row, used where a patient is nested inside another resource."""
    doctorId = serializers.IntegerField(source="doctor_id", read_only=True)
    insuranceId = serializers.IntegerField(source="insurance_company_id", read_only=True)
    insuranceOwnerId = serializers.IntegerField(source="insurance_owner_id", read_only=True, allow_null=True)

    class Meta:
        model = Patient
        fields = [
            "id",
            "name",
            "address",
            "phone",
            "email",
            "relationship",
            "doctorId",
            "insuranceId",
            "insuranceOwnerId",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields


class PatientSerializer(PatientSummarySerializer):
    doctor = DoctorSerializer(read_only=True)
    insuranceCompany = InsuranceCompanySerializer(source="insurance_company", read_only=True)
    insuranceOwner = PatientSummarySerializer(source="insurance_owner", read_only=True, allow_null=True)

    class Meta(PatientSummarySerializer.Meta):
        fields = [*PatientSummarySerializer.Meta.fields, "doctor", "insuranceCompany", "insuranceOwner"]
        read_only_fields = fields


class DoctorHistoryInputSerializer(serializers.Serializer):
    doctorId = id_field(source="doctor_id")
    patientId = id_field(source="patient_id")
    startDate = serializers.DateTimeField(source="start_date", required=False, allow_null=True)
    endDate = serializers.DateTimeField(source="end_date", required=False, allow_null=True)
    reasonForLeaving = text_field(source="reason_for_leaving")


class DoctorHistorySerializer(TimeStampedSerializer):
    doctorId = serializers.IntegerField(source="doctor_id", read_only=True)
    patientId = serializers.IntegerField(source="patient_id", read_only=True)
    startDate = serializers.DateTimeField(source="start_date", read_only=True)
    endDate = serializers.DateTimeField(source="end_date", read_only=True)
    reasonForLeaving = serializers.CharField(source="reason_for_leaving", read_only=True)
    doctor = DoctorSerializer(read_only=True)
    patient = PatientSummarySerializer(read_only=True)

    class Meta:
        model = DoctorHistory
        fields = [
            "doctorId",
            "patientId",
            "startDate",
            "endDate",
            "reasonForLeaving",
            "createdAt",
            "updatedAt",
            "doctor",
            "patient",
        ]
        read_only_fields = fields
