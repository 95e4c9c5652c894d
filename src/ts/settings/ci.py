# -*- coding: utf-8 -*-
"""
CI/Testing settings - inherits from development with SQLite database.

Use this for fast test runs: DJANGO_SETTINGS_MODULE=ts.settings.ci
"""
import os
import tempfile

os.environ.setdefault( 'DJANGO_SECRET_KEY', 'ci-only-not-a-secret' )
os.environ.setdefault( 'TS_DB_PATH', tempfile.gettempdir() )
os.environ.setdefault( 'TS_SHARING_CACHE_ENABLED', 'false' )

from .development import *

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.path.join( ENV.DATABASES_NAME_PATH, 'ts.sqlite3' ),
    }
}

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

# Minimal logging for cleaner test output
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{levelname} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'WARNING',
        },
    },
}
