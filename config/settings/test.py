"""
Test settings for the Showroom CMS project.
"""

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
        'LOCATION': 'showroom-test',
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

STORAGES['staticfiles'] = {
    'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
}

STORAGE_BUCKET_NAME = 'showroom-test'
STORAGE_ENDPOINT_URL = 'https://acct123.r2.cloudflarestorage.com'
STORAGE_PUBLIC_URL = 'https://media.example.com'
RECAPTCHA_SECRET_KEY = 'test-secret'
ARTICLE_SANITIZE_FAILURE_POLICY = 'passthrough'

# Keep test output quiet and avoid the rotating log file
LOGGING['handlers']['file'] = {
    'class': 'logging.NullHandler',
}
LOGGING['root']['level'] = 'WARNING'
LOGGING['loggers']['apps']['level'] = 'WARNING'
LOGGING['loggers']['django']['level'] = 'WARNING'

# Throttle history lives in the shared LocMem cache; keep it out of the way
REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    'DEFAULT_THROTTLE_RATES': {
        'contact': '1000/minute',
        'upload': '1000/minute',
        'burst': '1000/minute',
    },
}

# Let pytest's caplog see application logs
LOGGING['loggers']['apps']['handlers'] = ['file']
LOGGING['loggers']['apps']['propagate'] = True
