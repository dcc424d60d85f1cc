# clinic_core/insurance/apps.py
from django.apps import AppConfig


class InsuranceConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "clinic_core.insurance"
    label = "insurance"
