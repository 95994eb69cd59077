"""
Django settings for the stayflow project.

Values that differ between deployments come from the environment; a
``.env`` file at the project root is loaded first when present.
"""

import os
from decimal import Decimal
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "django-insecure-stayflow-dev-key")

DEBUG = os.getenv("DJANGO_DEBUG", "True").lower() in ("1", "true", "yes")

ALLOWED_HOSTS = [
    host.strip()
    for host in os.getenv("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
    if host.strip()
]

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "drf_spectacular",
    "store",
    "notifications",
    "frontdesk",
    "room",
    "reservation",
    "housekeeping",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "stayflow.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "stayflow.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"},
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
    {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},
]

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

REST_FRAMEWORK = {
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
}

SPECTACULAR_SETTINGS = {
    "TITLE": "Stayflow front desk API",
    "DESCRIPTION": "Rooms, reservations, housekeeping and the front desk dashboard",
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
}

# Persistence backend: "local" (this project's database) or "remote"
FRONTDESK_STORE_BACKEND = os.getenv("FRONTDESK_STORE_BACKEND", "local")
FRONTDESK_REMOTE_URL = os.getenv("FRONTDESK_REMOTE_URL", "")
FRONTDESK_REMOTE_TOKEN = os.getenv("FRONTDESK_REMOTE_TOKEN") or None
FRONTDESK_REMOTE_TIMEOUT = float(os.getenv("FRONTDESK_REMOTE_TIMEOUT", "10"))

FRONTDESK_PROPERTY = {
    "name": "Grand Hotel & Resort",
    "address": "123 Luxury Avenue, Paradise City, PC 12345",
    "phone": "+1 (555) 123-4567",
    "email": "info@grandhotel.com",
    "check_in_time": "15:00",
    "check_out_time": "11:00",
    "currency": "USD",
    "tax_rate": Decimal("12.5"),
}

FRONTDESK_LOG_LEVEL = os.getenv("FRONTDESK_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{asctime} {levelname} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {
        name: {
            "handlers": ["console"],
            "level": FRONTDESK_LOG_LEVEL,
            "propagate": False,
        }
        for name in (
            "frontdesk",
            "store",
            "room",
            "reservation",
            "housekeeping",
            "notifications",
        )
    },
}
