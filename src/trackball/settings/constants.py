"""
Shared configuration options.

Contains settings that
* are shared between all environments.
* are NOT secret.
* are NOT configurable.
"""
import os
from decimal import Decimal

# Build paths inside the project like this: os.path.join(BASE_DIR, ...)
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))


ALLOWED_HOSTS = ['*']
CORS_ORIGIN_ALLOW_ALL = True
ROOT_URLCONF = 'trackball.urls.app'
WSGI_APPLICATION = 'trackball.wsgi.application'
DEFAULT_FROM_EMAIL = 'My Trackball <noreply@trackball.cc>'
RELEASES_FROM_EMAIL = 'My Trackball <releases@trackball.cc>'
SUPPORT_FROM_EMAIL = 'My Trackball Support <support@trackball.cc>'


STATIC_ROOT = os.path.join(BASE_DIR, 'staticfiles')
STATIC_URL = '/static/'
STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
    'staticfiles': {
        'BACKEND': 'whitenoise.storage.CompressedStaticFilesStorage'
    },
}
WHITENOISE_MAX_AGE = 1000000

# Internationalization
LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

# Application definition
INSTALLED_APPS = [
    'whitenoise.runserver_nostatic',
    'corsheaders',
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'rest_framework',
    'rest_framework.authtoken',
    'django_filters',
    'users.apps.UsersConfig',
    'releases.apps.ReleasesConfig',
    'payouts.apps.PayoutsConfig',
    'subscriptions.apps.SubscriptionsConfig',
    'trackball.apps.TrackballConfig',
]


MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'whitenoise.middleware.WhiteNoiseMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]


TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [os.path.join(BASE_DIR, 'templates/')],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ]
        },
    }
]


# Password validation
AUTH_PASSWORD_VALIDATORS = [
    {
        'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator'
    },
    {'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator'},
    {'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator'},
    {'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator'},
]


# Auth user model to use
AUTH_USER_MODEL = 'users.User'


AUTHENTICATION_BACKENDS = ['django.contrib.auth.backends.ModelBackend']


# REST framework global settings
REST_FRAMEWORK = {
    'DEFAULT_PERMISSION_CLASSES': ('rest_framework.permissions.IsAuthenticated',),
    'DEFAULT_AUTHENTICATION_CLASSES': (
        'rest_framework.authentication.TokenAuthentication',
        'rest_framework.authentication.SessionAuthentication',
    ),
    'DEFAULT_RENDERER_CLASSES': ('rest_framework.renderers.JSONRenderer',),
    'DEFAULT_FILTER_BACKENDS': ('django_filters.rest_framework.DjangoFilterBackend',),
}

DEFAULT_AUTO_FIELD = 'django.db.models.AutoField'

# Stripe
STRIPE_API_URL = 'https://api.stripe.com/v1'
STRIPE_CURRENCY = 'cad'
STRIPE_TIMEOUT = 10

# Fines & strikes
STRIKE_LIMIT = 3
STRIKE_PENALTY_AMOUNT = Decimal('55.00')
STRIKE_PENALTY_REASON = 'Account suspension penalty - 3 strikes reached'
STRIKE_PENALTY_NOTES = 'Automatic penalty for reaching 3 strikes'
UNPAID_FINE_LOCK_DAYS = 7

# Track allowance pricing, CAD per track and month
TRACK_ALLOWANCE_PRICE_STANDARD = Decimal('4.00')
TRACK_ALLOWANCE_PRICE_BULK = Decimal('2.00')
TRACK_ALLOWANCE_BULK_THRESHOLD = 45

PAYOUT_MIN_AMOUNT = Decimal('1.00')
