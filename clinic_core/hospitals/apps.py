# clinic_core/hospitals/apps.py
from django.apps import AppConfig


class HospitalsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "clinic_core.hospitals"
    label = "hospitals"
