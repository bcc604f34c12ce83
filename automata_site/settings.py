"""
Django settings for loading and testing the automata app.
"""

SECRET_KEY = 'automata-insecure-test-key'

DEBUG = False

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    'automata.apps.AutomataConfig',
]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

USE_TZ = True

# Limits applied to every FiniteStateAutomaton; None means unbounded
AUTOMATA = {
    'MAX_STATES': None,
    'MAX_TRANSITIONS': None,
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'automata': {
            'handlers': ['console'],
            'level': 'WARNING',
        },
    },
}
