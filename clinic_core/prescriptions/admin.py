# clinic_core/prescriptions/admin.py
from __future__ import annotations

from django.contrib import admin

from clinic_core.prescriptions.models import Prescription


@admin.register(Prescription)
class PrescriptionAdmin(admin.ModelAdmin):
    list_display = ("rx_id", "patient", "doctor", "drug", "dosage", "refillable", "date_prescribed")
    list_filter = ("refillable",)
    search_fields = ("patient__name", "doctor__name", "drug__drug_name")
    readonly_fields = ("rx_id", "created_at", "updated_at")
    raw_id_fields = ("patient", "doctor", "drug")
    ordering = ("-date_prescribed",)
