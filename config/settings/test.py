"""
Settings for the pytest run
"""
from .base import *  # noqa: F401,F403

DEBUG = False

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    'DEFAULT_THROTTLE_CLASSES': [],
}

PAYMENT_GATEWAY = {
    'BACKEND': 'apps.payments.gateway.SimulatedPaymentGateway',
    'OPTIONS': {
        'delay_seconds': 0,
    },
}
