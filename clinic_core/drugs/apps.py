# clinic_core/drugs/apps.py
from django.apps import AppConfig


class DrugsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "clinic_core.drugs"
    label = "drugs"
