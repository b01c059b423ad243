"""
Test settings
"""
import sys

from .base import *

DEBUG = False

ALLOWED_HOSTS = ['testserver', 'localhost']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'restful-booker-tests',
    },
    'tokens': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'restful-booker-tests-tokens',
        'OPTIONS': {
            'MAX_ENTRIES': sys.maxsize,
        }
    }
}

STORAGES['staticfiles'] = {
    'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
}

SEED = False

AUTH_USERNAME = 'admin'
AUTH_PASSWORD = 'password123'
AUTH_TOKEN_STORE = 'apps.authentication.services.token_service.CacheTokenStore'
AUTH_TOKEN_CACHE = 'tokens'
