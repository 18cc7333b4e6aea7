"""Django base settings for GoWorship Admin - common to all environments."""
import os
from pathlib import Path

import environ

BASE_DIR = Path(__file__).resolve().parent.parent.parent

env = environ.Env(
    DEBUG=(bool, False),
    ALLOWED_HOSTS=(list, []),
    BACKEND_TIMEOUT=(float, 10.0),
    BACKEND_STRICT_STATUS=(bool, False),
    ADMIN_PAGE_SIZE=(int, 30),
)

environ.Env.read_env(os.path.join(BASE_DIR, '.env'))

# Application will fail to start if SECRET_KEY is not set (no default)
SECRET_KEY = env('SECRET_KEY')

DEBUG = env('DEBUG')

ALLOWED_HOSTS = env('ALLOWED_HOSTS')


DJANGO_APPS = [
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
]

THIRD_PARTY_APPS = [
    'rest_framework',
]

LOCAL_APPS = [
    'apps.core',
    'apps.accounts',
    'apps.events',
    'apps.churches',
    'apps.library',
    'apps.users',
]

INSTALLED_APPS = DJANGO_APPS + THIRD_PARTY_APPS + LOCAL_APPS


MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'config.urls'


TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.messages.context_processors.messages',
                'apps.core.context_processors.admin_session',
                'apps.core.context_processors.navigation',
            ],
        },
    },
]

WSGI_APPLICATION = 'config.wsgi.application'


# Every record lives behind the REST backend; there is no local database.
DATABASES = {}

SESSION_ENGINE = 'django.contrib.sessions.backends.signed_cookies'
SESSION_COOKIE_HTTPONLY = True

MESSAGE_STORAGE = 'django.contrib.messages.storage.cookie.CookieStorage'

# Holds the delete single-flight guard. The local-memory default is per
# process; multi-worker deployments set CACHE_URL to a shared cache.
CACHES = {
    'default': env.cache('CACHE_URL', default='locmemcache://goworship-admin'),
}


LANGUAGE_CODE = 'en-gb'

TIME_ZONE = 'Europe/London'

USE_I18N = True

USE_TZ = True


STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'
STATICFILES_DIRS = [
    BASE_DIR / 'static',
]


LOGIN_URL = '/login/'
LOGIN_REDIRECT_URL = '/dashboard/'


REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [
        'apps.core.permissions.IsAdminSession',
    ],
    'UNAUTHENTICATED_USER': None,
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
}


# REST backend every page talks to
BACKEND_BASE_URL = env('BACKEND_BASE_URL', default='http://localhost:8080/api')
BACKEND_TIMEOUT = env('BACKEND_TIMEOUT')
BACKEND_STRICT_STATUS = env('BACKEND_STRICT_STATUS')

# Rows requested per list page
ADMIN_PAGE_SIZE = env('ADMIN_PAGE_SIZE')

# How long a consumed delete token keeps further confirms as no-ops (seconds)
DELETE_TOKEN_TTL = 300

ADMIN_SITE_NAME = env('ADMIN_SITE_NAME', default='GoWorship')
