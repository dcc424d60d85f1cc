# clinic_core/doctors/admin.py
from __future__ import annotations

from django.contrib import admin

from clinic_core.doctors.models import Doctor


@admin.register(Doctor)
class DoctorAdmin(admin.ModelAdmin):
    list_display = ("name", "specialization", "phone", "hospital_affiliation", "updated_at")
    list_filter = ("specialization",)
    search_fields = ("name", "specialization", "phone", "address")
    readonly_fields = ("id", "created_at", "updated_at")
    ordering = ("name",)
