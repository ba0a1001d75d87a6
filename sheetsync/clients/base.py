from abc import ABC, abstractmethod

import requests


class BaseClient(ABC):
    @abstractmethod
    def make_session(self, token) -> requests.Session:
        """Create an HTTP session carrying the sheet token headers."""

    @abstractmethod
    def get_products(self, session) -> list[dict]:
        """Return the remote catalog in the order the API sends it."""

    @abstractmethod
    def update_products(self, session, products, deleted_ids) -> dict:
        """Upsert ``products`` and delete ``deleted_ids``; return the decoded response."""

    @abstractmethod
    def test_connection(self, session) -> dict:
        """Check the endpoint is reachable and accepts the token."""
