# -*- coding: utf-8 -*-
"""
Settings shared by every environment. Environment-specific modules import
everything from here and override what they need.
"""
import os

from ts.environment.server import EnvironmentSettings

ENV = EnvironmentSettings.get()

BASE_DIR = os.path.dirname( os.path.dirname( os.path.dirname( os.path.abspath( __file__ ))))

SECRET_KEY = ENV.SECRET_KEY
VERSION = ENV.VERSION

DEBUG = False

ALLOWED_HOSTS = list( ENV.ALLOWED_HOSTS )

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    'rest_framework',

    'custom',
    'ts.apps.common',
    'ts.apps.user',
    'ts.apps.trips',
    'ts.apps.items',
    'ts.apps.attendees',
    'ts.apps.companions',
    'ts.apps.permissions',
    'ts.apps.api',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'ts.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'ts.wsgi.application'

if ENV.has_server_database:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'HOST': ENV.DATABASE_HOST,
            'PORT': ENV.DATABASE_PORT,
            'NAME': ENV.DATABASE_NAME,
            'USER': ENV.DATABASE_USER,
            'PASSWORD': ENV.DATABASE_PASSWORD,
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': os.path.join( ENV.DATABASES_NAME_PATH, 'ts.sqlite3' ),
        }
    }

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

AUTH_USER_MODEL = 'custom.CustomUser'

AUTH_PASSWORD_VALIDATORS = [
    { 'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator' },
    { 'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator' },
    { 'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator' },
    { 'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator' },
]

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = '/static/'

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'rest_framework.authentication.SessionAuthentication',
    ],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.IsAuthenticated',
    ],
    'EXCEPTION_HANDLER': 'ts.apps.api.exception_handler.exception_handler',
}

REDIS_HOST = ENV.REDIS_HOST
REDIS_PORT = ENV.REDIS_PORT
REDIS_KEY_PREFIX = ENV.REDIS_KEY_PREFIX

# Cache invalidation for sharing mutations is best-effort and never
# affects the outcome of a mutation.
#
SHARING_CACHE_ENABLED = ENV.SHARING_CACHE_ENABLED
