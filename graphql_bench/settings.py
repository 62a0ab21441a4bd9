"""
Django settings for graphql_bench project.

Every value can be overridden from the environment; the defaults reproduce
the benchmark harness as-is (port 3002, GraphiQL on, no access log).
"""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_flag(name, default=''):
    return os.environ.get(name, default).strip().lower() in {'1', 'true', 'yes', 'on'}


SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'graphql-bench-insecure-key')
DEBUG = _env_flag('DJANGO_DEBUG')
ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get('DJANGO_ALLOWED_HOSTS', '*').split(',')
    if host.strip()
]

INSTALLED_APPS = [
    'django.contrib.staticfiles',
    'rest_framework',
    'graphene_django',
    'bench',
]

MIDDLEWARE = [
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'graphql_bench.urls'
WSGI_APPLICATION = 'graphql_bench.wsgi.application'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
            ],
        },
    },
]

# Nothing is persisted; the in-memory database only satisfies the
# transaction hooks graphene-django touches on every request.
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = False
USE_TZ = True

STATIC_URL = 'static/'
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

GRAPHENE = {
    'SCHEMA': 'graphql_bench.schema.schema',
}

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [],
    'DEFAULT_RENDERER_CLASSES': ['rest_framework.renderers.JSONRenderer'],
    'DEFAULT_PARSER_CLASSES': ['rest_framework.parsers.JSONParser'],
    'UNAUTHENTICATED_USER': None,
}

GRAPHIQL_ENABLED = _env_flag('GRAPHIQL_ENABLED', 'true')

GRAPHQL_BENCH_HOST = os.environ.get('GRAPHQL_BENCH_HOST', '0.0.0.0')
GRAPHQL_BENCH_PORT = int(os.environ.get('GRAPHQL_BENCH_PORT', '3002'))
GRAPHQL_BENCH_BACKLOG = int(os.environ.get('GRAPHQL_BENCH_BACKLOG', '128'))
GRAPHQL_BENCH_ACCESS_LOG = _env_flag('GRAPHQL_BENCH_ACCESS_LOG')
GRAPHQL_BENCH_API_MAX_ITERATIONS = int(os.environ.get('GRAPHQL_BENCH_API_MAX_ITERATIONS', '10000'))

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': os.environ.get('DJANGO_LOG_LEVEL', 'INFO'),
    },
    'loggers': {
        'django.server': {
            'handlers': ['console'],
            'level': 'INFO' if GRAPHQL_BENCH_ACCESS_LOG else 'WARNING',
            'propagate': False,
        },
    },
}
