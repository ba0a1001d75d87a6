from pathlib import Path

from environs import Env

env = Env()
env.read_env(recurse=False)

BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = env.str('SECRET_KEY', 'django-insecure-3h0v!s7q2c+w9k@x1b$8r#n5e^y4m)u6t(p0l%z&d*a=g-f_j')

ALLOWED_HOSTS = env.list('ALLOWED_HOSTS', [])

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'sheetsync',
]

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'plain': {'format': '%(asctime)s %(levelname)s %(name)s: %(message)s'},
    },
    'handlers': {
        'console': {'class': 'logging.StreamHandler', 'formatter': 'plain'},
    },
    'loggers': {
        'sheetsync': {
            'handlers': ['console'],
            'level': env.str('LOG_LEVEL', 'INFO'),
        },
    },
}

# Celery
CELERY_BROKER_URL = env.str('CELERY_BROKER_URL', 'redis://localhost:6379/0')
CELERY_RESULT_BACKEND = CELERY_BROKER_URL

# Remote catalog API (base URL and secret are per-user properties, not settings)
SHEETSYNC_API_NAMESPACE = env.str('SHEETSYNC_API_NAMESPACE', 'sheets-api/v1')
SHEETSYNC_HTTP_TIMEOUT = env.float('SHEETSYNC_HTTP_TIMEOUT', 30.0)
SHEETSYNC_MAX_RETRIES = env.int('SHEETSYNC_MAX_RETRIES', 5)

# Sync providers — swap via env or override in dev.py/prod.py
SHEETSYNC_GRID_CLASS = env.str('SHEETSYNC_GRID_CLASS', 'sheetsync.grids.csv_grid.CsvFileGrid')
SHEETSYNC_CLIENT_CLASS = env.str('SHEETSYNC_CLIENT_CLASS', 'sheetsync.clients.catalog_client.CatalogClient')
SHEETSYNC_GRID_DIR = env.path('SHEETSYNC_GRID_DIR', BASE_DIR / 'grids')
