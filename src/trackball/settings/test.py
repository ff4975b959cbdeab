"""
Settings used by the test suite, no external services required.
"""
from .unified import *

SECRET_KEY = 'test-secret-key'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

CACHES = {'default': {'BACKEND': 'django.core.cache.backends.locmem.LocMemCache'}}

EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'

BROKER_URL = 'memory://'
CELERY_ALWAYS_EAGER = True

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
    'staticfiles': {
        'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'
    },
}

STRIPE_SECRET_KEY = 'sk_test_placeholder'
SLACK_WEBHOOK_URL_ERRORS = None
