"""
Django settings for the Boxton layout project.

Serves the Boxton page layout template and a preview page that embeds it.
No database: the layout is a pure render of caller-supplied inputs.

SECURITY:
- SECRET_KEY is REQUIRED in production (no fallback)
- DEBUG defaults to False in production
- ALLOWED_HOSTS must be explicitly set in production
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env for local development
load_dotenv()

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent


# =============================================================================
# SECURITY SETTINGS - FAIL-CLOSED IN PRODUCTION
# =============================================================================

_is_production = os.environ.get('PRODUCTION')

if _is_production:
    # PRODUCTION: Fail if SECRET_KEY not set
    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        raise RuntimeError("SECRET_KEY environment variable is required in production")
    DEBUG = False
    _hosts = os.environ.get('ALLOWED_HOSTS', '')
    if not _hosts:
        raise RuntimeError("ALLOWED_HOSTS environment variable is required in production")
    ALLOWED_HOSTS = [h.strip() for h in _hosts.split(',') if h.strip()]
else:
    # LOCAL DEVELOPMENT: Permissive defaults
    SECRET_KEY = os.environ.get('SECRET_KEY', 'django-insecure-dev-only-local-testing')
    DEBUG = os.environ.get('DEBUG', 'True').lower() in ('true', '1', 'yes')
    ALLOWED_HOSTS = os.environ.get('ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',')


# =============================================================================
# APPLICATION DEFINITION
# =============================================================================

INSTALLED_APPS = [
    'whitenoise.runserver_nostatic',
    'django.contrib.staticfiles',
    # Boxton layout (template, filters, preview)
    'boxton_app',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'whitenoise.middleware.WhiteNoiseMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'boxton_django.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.template.context_processors.i18n',
            ],
        },
    },
]

WSGI_APPLICATION = 'boxton_django.wsgi.application'


# =============================================================================
# DATABASE
# The layout renders caller-supplied inputs only; nothing is persisted.
# =============================================================================

DATABASES = {}


# =============================================================================
# ADDITIONAL SECURITY FOR PRODUCTION
# =============================================================================

if _is_production:
    SECURE_CONTENT_TYPE_NOSNIFF = True
    X_FRAME_OPTIONS = 'DENY'


# =============================================================================
# INTERNATIONALIZATION
# Static layout strings ("Skip to main content", landmark labels) are
# translated through Django's gettext catalogs.
# =============================================================================

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True


# =============================================================================
# STATIC FILES
# =============================================================================

STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'
STORAGES = {
    'staticfiles': {
        'BACKEND': 'whitenoise.storage.CompressedStaticFilesStorage',
    },
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
}


# =============================================================================
# BOXTON LAYOUT
# =============================================================================

# Template used by boxton_app.layout.render_layout()
BOXTON_TEMPLATE = os.environ.get('BOXTON_TEMPLATE', 'boxton_app/layout--boxton.html')


# =============================================================================
# LOGGING - Output to stdout
# =============================================================================

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'ERROR',
            'propagate': False,
        },
        'django.request': {
            'handlers': ['console'],
            'level': 'ERROR',
            'propagate': False,
        },
        # No own handler: records propagate to the root console handler
        'boxton_app': {
            'level': os.environ.get('BOXTON_LOG_LEVEL', 'WARNING').upper(),
        },
    },
}
