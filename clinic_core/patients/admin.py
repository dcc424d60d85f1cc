# clinic_core/patients/admin.py
from __future__ import annotations

from django.contrib import admin

from clinic_core.patients.models import DoctorHistory, Patient


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ("name", "relationship", "doctor", "insurance_company", "insurance_owner", "updated_at")
    list_filter = ("relationship", "insurance_company")
    search_fields = ("name", "phone", "email", "address")
    readonly_fields = ("id", "created_at", "updated_at")
    raw_id_fields = ("doctor", "insurance_company", "insurance_owner")
    ordering = ("name",)


@admin.register(DoctorHistory)
class DoctorHistoryAdmin(admin.ModelAdmin):
    list_display = ("doctor", "patient", "start_date", "end_date")
    search_fields = ("doctor__name", "patient__name", "reason_for_leaving")
    readonly_fields = ("created_at", "updated_at")
    raw_id_fields = ("doctor", "patient")
    ordering = ("-start_date",)
