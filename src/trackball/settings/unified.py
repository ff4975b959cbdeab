"""
Shared configuration options.

Contains settings that
* are shared between all environments.
* are secret and/or configurable.
"""
import os

import sentry_sdk
from sentry_sdk.integrations.celery import CeleryIntegration
from sentry_sdk.integrations.django import DjangoIntegration

from corsheaders.defaults import default_headers
from bananas.environment import env

from trackball.settings.constants import *

SENTRY_DSN = env.get("SENTRY_DSN")
SENTRY_ENV = env.get("SENTRY_ENV")

if SENTRY_DSN and SENTRY_ENV:
    sentry_sdk.init(
        dsn=SENTRY_DSN,
        environment=SENTRY_ENV,
        integrations=[DjangoIntegration(), CeleryIntegration()],
        traces_sample_rate=0.05,
    )

SECRET_KEY = env.get('DJANGO_SECRET_KEY')

DEBUG = env.get_bool('DJANGO_DEBUG', False)

# Only specify and do conditional checks with 'dev' or 'staging'.
# This returning `None` implies that the active environment is production.
TRACKBALL_ENV = env.get('TRACKBALL_ENV')

# Celery message broker settings
BROKER_URL = env.get('CELERY_BROKER_URL', 'redis://localhost:6379/0')

CELERY_ENABLE_REMOTE_CONTROL = False
CELERY_SEND_EVENTS = False
CELERY_ALWAYS_EAGER = env.get_bool('CELERY_ALWAYS_EAGER', False)
CELERY_IGNORE_RESULT = True
CELERY_TASK_SERIALIZER = 'json'
CELERY_ACCEPT_CONTENT = ['json']

# Email settings
EMAIL_BACKEND = env.get(
    'DJANGO_EMAIL_BACKEND', 'django.core.mail.backends.smtp.EmailBackend'
)
EMAIL_HOST = env.get('EMAIL_HOST', 'localhost')
EMAIL_PORT = env.get_int('EMAIL_PORT', 25)
EMAIL_HOST_USER = env.get('EMAIL_HOST_USER', '')
EMAIL_HOST_PASSWORD = env.get('EMAIL_HOST_PASSWORD', '')
EMAIL_USE_TLS = env.get_bool('EMAIL_USE_TLS', False)

# Stripe
STRIPE_SECRET_KEY = env.get('STRIPE_SECRET_KEY')

# Application specific settings
API_URL = env.get('TRACKBALL_API_URL')
APP_URL = env.get('TRACKBALL_APP_URL', 'https://trackball.cc')

# Slack webhook for notifications
SLACK_WEBHOOK_URL_ERRORS = env.get('SLACK_WEBHOOK_URL_ERRORS')

CORS_ALLOW_HEADERS = default_headers + ('x-user-agent',)

# Logger settings
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'messageOnly': {'format': '%(message)s', 'datefmt': '%Y-%m-%d %H:%M:%S %z'},
        '-v': {
            'format': '[%(asctime)s] %(levelname)s - %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S %z',
        },
        '-vv': {
            'format': '[%(asctime)s] %(levelname)s - %(name)s.%(funcName)s(): '
            '%(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S %z',
        },
    },
    'handlers': {
        'logstash': {
            'class': 'trackball.logging.TrackballStreamHandler',
            'level': 'DEBUG',
        },
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'messageOnly',
            'level': 'DEBUG',
        },
        'slack': {'class': 'trackball.logging.SlackHandler', 'level': 'ERROR'},
    },
    'loggers': {
        # Our apps
        'trackball': {
            'level': os.getenv('DJANGO_LOG_LEVEL', 'INFO'),
            'handlers': ['console', 'slack'],
        },
        'payouts': {
            'level': os.getenv('DJANGO_LOG_LEVEL', 'INFO'),
            'handlers': ['console', 'slack'],
        },
        'releases': {
            'level': os.getenv('DJANGO_LOG_LEVEL', 'INFO'),
            'handlers': ['console', 'slack'],
        },
        'subscriptions': {
            'level': os.getenv('DJANGO_LOG_LEVEL', 'INFO'),
            'handlers': ['console', 'slack'],
        },
        'users': {
            'level': os.getenv('DJANGO_LOG_LEVEL', 'INFO'),
            'handlers': ['console', 'slack'],
        },
        # Logging the API calls in Logstash format separately
        'api': {
            'level': os.getenv('DJANGO_LOG_LEVEL', 'INFO'),
            'handlers': ['logstash', 'slack'],
            'propagate': False,
        },
        # Logging in tasks through the celery logger puts messages in this namespace
        'celery': {
            'level': os.getenv('DJANGO_LOG_LEVEL', 'INFO'),
            'handlers': ['console', 'slack'],
        },
    },
    'root': {'level': 'WARNING', 'handlers': ['console', 'slack']},  # catch all modules
}

DATABASES = {
    'default': {
        'ENGINE': env.get('DJANGO_DB_DEFAULT_ENGINE', 'django.db.backends.postgresql'),
        'NAME': env.get('DJANGO_DB_DEFAULT_NAME', 'trackball'),
        'USER': env.get('DJANGO_DB_DEFAULT_USER', 'postgres'),
        'PASSWORD': env.get('DJANGO_DB_DEFAULT_PASSWORD', 'postgres'),
        'HOST': env.get('DJANGO_DB_DEFAULT_HOST'),
        'PORT': env.get('DJANGO_DB_DEFAULT_PORT', 5432),
    }
}

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.db.DatabaseCache',
        'LOCATION': 'django_cache',
    }
}
