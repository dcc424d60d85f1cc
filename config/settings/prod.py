# config/settings/prod.py
from django.core.exceptions import ImproperlyConfigured

from .base import *  # noqa

if SECRET_KEY == DEFAULT_SECRET_KEY:
    raise ImproperlyConfigured("DJANGO_SECRET_KEY must be set in production")
if DEBUG:
    raise ImproperlyConfigured("DJANGO_DEBUG must be off in production")

CORS_ALLOW_ALL_ORIGINS = False

SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = "DENY"
