import logging
from dataclasses import dataclass

from django.conf import settings

from sheetsync.exceptions import ConfigurationError, ValidationError

logger = logging.getLogger(__name__)

BASE_URL_KEY = 'WP_BASE_URL'
SECRET_KEY_KEY = 'WP_SECRET_KEY'

ENDPOINTS = {
    'get_products': 'get_products',
    'update_products': 'update_products',
    'test_connection': 'test_connection',
}


@dataclass(frozen=True)
class SyncConfig:
    base_url: str = ''
    secret_key: str = ''

    @property
    def is_configured(self):
        return bool(self.base_url) and bool(self.secret_key)

    def endpoint(self, name):
        namespace = getattr(settings, 'SHEETSYNC_API_NAMESPACE', 'sheets-api/v1').strip('/')
        return f"{self.base_url.rstrip('/')}/wp-json/{namespace}/{ENDPOINTS[name]}"

    def as_dict(self):
        # The secret itself never leaves the store.
        return {
            'base_url': self.base_url,
            'has_secret_key': bool(self.secret_key),
            'is_configured': self.is_configured,
        }


def load_config(store) -> SyncConfig:
    return SyncConfig(
        base_url=store.get(BASE_URL_KEY) or '',
        secret_key=store.get(SECRET_KEY_KEY) or '',
    )


def save_config(store, base_url, secret_key=None) -> SyncConfig:
    """Persist the API settings; an empty ``secret_key`` keeps the stored one."""
    base_url = (base_url or '').strip()
    if not base_url:
        raise ValidationError('WordPress base URL is required.')

    store.set(BASE_URL_KEY, base_url)
    if secret_key:
        store.set(SECRET_KEY_KEY, secret_key)
    logger.info("Saved API settings for %s (secret %s)", base_url, "updated" if secret_key else "unchanged")
    return load_config(store)


def require_configured(config):
    if not config.is_configured:
        raise ConfigurationError('Please configure the WordPress API URL and secret key first in Settings.')
    return config
