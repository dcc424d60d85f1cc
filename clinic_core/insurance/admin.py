# clinic_core/insurance/admin.py
from __future__ import annotations

from django.contrib import admin

from clinic_core.insurance.models import InsuranceCompany


@admin.register(InsuranceCompany)
class InsuranceCompanyAdmin(admin.ModelAdmin):
    list_display = ("name", "phone", "updated_at")
    search_fields = ("name", "phone")
    readonly_fields = ("id", "created_at", "updated_at")
    ordering = ("name",)
