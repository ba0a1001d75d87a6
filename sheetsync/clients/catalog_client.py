import logging
import time

import requests
from django.conf import settings

from sheetsync.exceptions import FormatError, RemoteError

from .base import BaseClient

logger = logging.getLogger(__name__)

MAX_RETRIES = getattr(settings, 'SHEETSYNC_MAX_RETRIES', 5)
RETRY_BASE_DELAY = 1.0
TIMEOUT = getattr(settings, 'SHEETSYNC_HTTP_TIMEOUT', 30.0)


def _retry_delay(response, attempt):
    backoff = RETRY_BASE_DELAY * (2 ** attempt)
    try:
        retry_after = float(response.headers.get('Retry-After', RETRY_BASE_DELAY))
    except ValueError:
        # HTTP-date form; fall back to plain backoff.
        return backoff
    return max(retry_after, backoff)


def _json_or_none(response):
    try:
        return response.json()
    except ValueError:
        return None


class CatalogClient(BaseClient):
    def __init__(self, config):
        self.config = config

    def make_session(self, token) -> requests.Session:
        session = requests.Session()
        session.headers.update({
            'Content-Type': 'application/json',
            'X-Sheet-Token': token,
            'Authorization': f"Bearer {token}",
        })
        return session

    def _request(self, session, method, url, **kwargs):
        for attempt in range(MAX_RETRIES):
            response = session.request(method, url, timeout=TIMEOUT, **kwargs)

            if response.status_code == 429:
                delay = _retry_delay(response, attempt)
                logger.warning(
                    "Rate limited (429) on %s, attempt %d/%d, waiting %.1fs",
                    url, attempt + 1, MAX_RETRIES, delay,
                )
                time.sleep(delay)
                continue

            return response

        raise RemoteError(
            f"API Error: rate limit exceeded after {MAX_RETRIES} retries (URL: {url})",
            status_code=429,
            url=url,
        )

    def get_products(self, session) -> list[dict]:
        url = self.config.endpoint('get_products')
        response = self._request(session, 'GET', url)

        if response.status_code != 200:
            raise RemoteError(
                f"API Error: {response.text} (URL: {url})",
                status_code=response.status_code,
                body=response.text,
                url=url,
            )

        result = _json_or_none(response)
        products = result.get('data') if isinstance(result, dict) else None
        if not isinstance(products, list):
            raise FormatError('Invalid response format from API')
        return products

    def _call(self, session, method, endpoint, payload=None):
        url = self.config.endpoint(endpoint)
        if payload is None:
            response = self._request(session, method, url)
        else:
            response = self._request(session, method, url, json=payload)

        result = _json_or_none(response)
        if response.status_code != 200:
            message = result.get('message') if isinstance(result, dict) else None
            raise RemoteError(
                f"API Error: {message or response.text}",
                status_code=response.status_code,
                body=response.text,
                url=url,
            )
        return result

    def update_products(self, session, products, deleted_ids) -> dict:
        payload = {'products': products, 'deleted_ids': list(deleted_ids)}
        result = self._call(session, 'POST', 'update_products', payload)
        if not isinstance(result, dict):
            raise FormatError('Invalid response format from API')
        return result

    def test_connection(self, session) -> dict:
        result = self._call(session, 'GET', 'test_connection')
        return result if isinstance(result, dict) else {}
