# clinic_core/drugs/admin.py
from __future__ import annotations

from django.contrib import admin

from clinic_core.drugs.models import Drug


@admin.register(Drug)
class DrugAdmin(admin.ModelAdmin):
    list_display = ("drug_name", "benefits", "side_effects", "updated_at")
    search_fields = ("drug_name", "benefits", "side_effects")
    readonly_fields = ("id", "created_at", "updated_at")
    ordering = ("drug_name",)
