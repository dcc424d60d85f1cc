# clinic_core/prescriptions/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from clinic_core.common.api.serializers import TimeStampedSerializer, id_field, text_field
from clinic_core.doctors.api.serializers import DoctorSerializer
from clinic_core.drugs.api.serializers import DrugSerializer
from clinic_core.patients.api.serializers import PatientSummarySerializer
from clinic_core.prescriptions.models import Prescription


class PrescriptionInputSerializer(serializers.Serializer):
    datePrescribed = serializers.DateTimeField(source="date_prescribed", required=False, allow_null=True)
    dosage = text_field(max_length=20)
    duration = serializers.DateTimeField(required=False, allow_null=True)
    refillable = serializers.BooleanField(required=False, allow_null=True)
    refillNo = serializers.IntegerField(source="refill_no", required=False, allow_null=True, min_value=0)
    comments = text_field()
    nonRefillReason = text_field(source="non_refill_reason")
    patientId = id_field(source="patient_id")
    doctorId = id_field(source="doctor_id")
    drugId = id_field(source="drug_id")


class PrescriptionSerializer(TimeStampedSerializer):
    rxId = serializers.IntegerField(source="rx_id", read_only=True)
    datePrescribed = serializers.DateTimeField(source="date_prescribed", read_only=True)
    refillNo = serializers.IntegerField(source="refill_no", read_only=True, allow_null=True)
    nonRefillReason = serializers.CharField(source="non_refill_reason", read_only=True)
    patientId = serializers.IntegerField(source="patient_id", read_only=True)
    doctorId = serializers.IntegerField(source="doctor_id", read_only=True)
    drugId = serializers.IntegerField(source="drug_id", read_only=True)
    patient = PatientSummarySerializer(read_only=True)
    doctor = DoctorSerializer(read_only=True)
    drug = DrugSerializer(read_only=True)

    class Meta:
        model = Prescription
        fields = [
            "rxId",
            "datePrescribed",
            "dosage",
            "duration",
            "refillable",
            "refillNo",
            "comments",
            "nonRefillReason",
            "patientId",
            "doctorId",
            "drugId",
            "createdAt",
            "updatedAt",
            "patient",
            "doctor",
            "drug",
        ]
        read_only_fields = fields
