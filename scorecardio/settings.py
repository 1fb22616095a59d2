#
# Copyright (c) nexB Inc. and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See https://github.com/nexB/scancode.io for support or download.
# See https://aboutcode.org for more information about AboutCode FOSS projects.
#

import sys
from pathlib import Path

import environ

PROJECT_DIR = environ.Path(__file__) - 1
ROOT_DIR = PROJECT_DIR - 1

# True if running tests through `./manage test`
IS_TESTS = "test" in sys.argv

# Environment

ENV_FILE = "/etc/scorecardio/.env"
if not Path(ENV_FILE).exists():
    ENV_FILE = ROOT_DIR(".env")

# Do not use local .env environment when running the tests.
if IS_TESTS:
    ENV_FILE = None

env = environ.Env()
environ.Env.read_env(ENV_FILE)

# Security

SECRET_KEY = env.str("SECRET_KEY", default="")

ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["*"])

# SECURITY WARNING: don't run with debug turned on in production
DEBUG = env.bool("SCORECARDIO_DEBUG", default=False)

SECURE_CONTENT_TYPE_NOSNIFF = env.bool("SECURE_CONTENT_TYPE_NOSNIFF", default=True)

X_FRAME_OPTIONS = env.str("X_FRAME_OPTIONS", default="DENY")

# ScoreCard.io

# Port used by the `serve` management command.
MS_PORT = env.int("MS_PORT", default=8083)

SCORECARDIO_LOG_LEVEL = env.str("SCORECARDIO_LOG_LEVEL", "INFO")

# OpenSSF Scorecard API, the repository path is appended to this base URL.
SCORECARD_API_URL = env.str(
    "SCORECARD_API_URL", default="https://api.securityscorecards.dev/projects/"
)

# Seconds allowed for each request on the Scorecard API.
SCORECARD_API_TIMEOUT = env.int("SCORECARD_API_TIMEOUT", default=30)

# The `scorecard` executable used as the last resort data source.
SCORECARD_CLI = env.str("SCORECARD_CLI", default="scorecard")

# Default to 10 minutes.
SCORECARD_CLI_TIMEOUT = env.int("SCORECARD_CLI_TIMEOUT", default=600)

# The local `scorecard` analysis is only attempted when a token is available.
GITHUB_TOKEN = env.str("GITHUB_TOKEN", default="")

# Application definition

INSTALLED_APPS = [
    # Local apps
    "scorecard",
    # Django built-in
    "django.contrib.contenttypes",
    "django.contrib.auth",
    # Third-party apps
    "rest_framework",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "scorecardio.urls"

WSGI_APPLICATION = "scorecardio.wsgi.application"

# Nothing is persisted, each request resolves the scorecard from scratch.
DATABASES = {}

DEFAULT_AUTO_FIELD = "django.db.models.AutoField"

# Testing

if IS_TESTS:
    from django.core.management.utils import get_random_secret_key

    SECRET_KEY = get_random_secret_key()
    GITHUB_TOKEN = ""
    SCORECARD_API_URL = "https://api.securityscorecards.dev/projects/"
    SCORECARD_CLI = "scorecard"

# Logging

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "{levelname} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "null": {
            "class": "logging.NullHandler",
        },
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "scorecard": {
            "handlers": ["null"] if IS_TESTS else ["console"],
            "level": SCORECARDIO_LOG_LEVEL,
            "propagate": False,
        },
        "django": {
            "handlers": ["null"] if IS_TESTS else ["console"],
            "propagate": False,
        },
    },
}

# Internationalization

LANGUAGE_CODE = "en-us"

TIME_ZONE = env.str("TIME_ZONE", default="UTC")

USE_I18N = False

USE_TZ = True

# Django restframework

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ("rest_framework.permissions.AllowAny",),
    "DEFAULT_RENDERER_CLASSES": ("rest_framework.renderers.JSONRenderer",),
    "UNAUTHENTICATED_USER": None,
}
