# clinic_core/prescriptions/apps.py
from django.apps import AppConfig


class PrescriptionsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "clinic_core.prescriptions"
    label = "prescriptions"
