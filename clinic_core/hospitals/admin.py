# clinic_core/hospitals/admin.py
from __future__ import annotations

from django.contrib import admin

from clinic_core.hospitals.models import Hospital, HospitalAffiliation


@admin.register(Hospital)
class HospitalAdmin(admin.ModelAdmin):
    list_display = ("name", "address", "phone", "updated_at")
    search_fields = ("name", "address", "phone")
    readonly_fields = ("id", "created_at", "updated_at")
    ordering = ("name",)


@admin.register(HospitalAffiliation)
class HospitalAffiliationAdmin(admin.ModelAdmin):
    list_display = ("doctor", "hospital", "affiliation_date")
    list_filter = ("hospital",)
    search_fields = ("doctor__name", "hospital__name")
    readonly_fields = ("created_at", "updated_at")
    ordering = ("hospital", "doctor")
