"""
Test settings: SQLite database and a throwaway secret key.
"""

import os

os.environ.setdefault('SECRET_KEY', 'test-secret-key-not-for-production')
os.environ.setdefault('DEBUG', 'False')
os.environ.setdefault('SECURE_SSL_REDIRECT', 'False')

from .settings import *  # noqa: E402,F401,F403

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

LOGGING['root']['level'] = 'WARNING'  # noqa: F405
