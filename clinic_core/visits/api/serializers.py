# clinic_core/visits/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from clinic_core.common.api.serializers import TimeStampedSerializer, id_field
from clinic_core.doctors.api.serializers import DoctorSerializer
from clinic_core.patients.api.serializers import PatientSummarySerializer
from clinic_core.visits.models import OfficeVisit


def _flag(source: str) -> serializers.BooleanField:
    return serializers.BooleanField(source=source, required=False, allow_null=True)


def _notes(source: str | None = None) -> serializers.CharField:
    kwargs = {"source": source} if source else {}
    return serializers.CharField(required=False, allow_blank=True, allow_null=True, **kwargs)


class OfficeVisitInputSerializer(serializers.Serializer):
    doctorId = id_field(source="doctor_id")
    patientId = id_field(source="patient_id")
    visitDate = serializers.DateTimeField(source="visit_date", required=False, allow_null=True)
    symptoms = _notes()
    initialVisit = _flag("initial_visit")
    initialDiagnosis = _notes("initial_diagnosis")
    followupVisit = _flag("followup_visit")
    diagnosisStatus = _notes("diagnosis_status")
    routineVisit = _flag("routine_visit")
    bloodPressure = _notes("blood_pressure")
    height = serializers.FloatField(required=False, allow_null=True, min_value=0)
    weight = serializers.FloatField(required=False, allow_null=True, min_value=0)
    diagnosis = _notes()
    otherVisit = _flag("other_visit")


class OfficeVisitSerializer(TimeStampedSerializer):
    patientId = serializers.IntegerField(source="patient_id", read_only=True)
    doctorId = serializers.IntegerField(source="doctor_id", read_only=True)
    visitDate = serializers.DateTimeField(source="visit_date", read_only=True)
    initialVisit = serializers.BooleanField(source="initial_visit", read_only=True)
    initialDiagnosis = serializers.CharField(source="initial_diagnosis", read_only=True)
    followupVisit = serializers.BooleanField(source="followup_visit", read_only=True)
    diagnosisStatus = serializers.CharField(source="diagnosis_status", read_only=True)
    routineVisit = serializers.BooleanField(source="routine_visit", read_only=True)
    bloodPressure = serializers.CharField(source="blood_pressure", read_only=True)
    otherVisit = serializers.BooleanField(source="other_visit", read_only=True)
    patient = PatientSummarySerializer(read_only=True)
    doctor = DoctorSerializer(read_only=True)

    class Meta:
        model = OfficeVisit
        fields = [
            "patientId",
            "doctorId",
            "visitDate",
            "symptoms",
            "initialVisit",
            "initialDiagnosis",
            "followupVisit",
            "diagnosisStatus",
            "routineVisit",
            "bloodPressure",
            "height",
            "weight",
            "diagnosis",
            "otherVisit",
            "createdAt",
            "updatedAt",
            "patient",
            "doctor",
        ]
        read_only_fields = fields
