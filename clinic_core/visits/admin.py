# clinic_core/visits/admin.py
from __future__ import annotations

from django.contrib import admin

from clinic_core.visits.models import OfficeVisit


@admin.register(OfficeVisit)
class OfficeVisitAdmin(admin.ModelAdmin):
    list_display = ("patient", "doctor", "visit_date", "initial_visit", "followup_visit", "routine_visit", "other_visit")
    list_filter = ("initial_visit", "followup_visit", "routine_visit", "other_visit")
    search_fields = ("patient__name", "doctor__name", "symptoms", "diagnosis")
    readonly_fields = ("created_at", "updated_at")
    raw_id_fields = ("patient", "doctor")
    date_hierarchy = "visit_date"
    ordering = ("-visit_date",)
