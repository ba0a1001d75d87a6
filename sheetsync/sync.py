import logging
from dataclasses import asdict, dataclass
from typing import Optional

from sheetsync import tokens
from sheetsync.config import require_configured
from sheetsync.exceptions import SyncError, ValidationError
from sheetsync.rows import HEADERS, is_blank, normalize_row, product_to_row, row_to_product

logger = logging.getLogger(__name__)

NO_SELECTION_MESSAGE = 'Please select at least one product row to update.'
NO_ROWS_MESSAGE = 'No products found in the sheet. Please fetch products first.'


@dataclass
class SyncResult:
    success: bool
    message: str
    count: Optional[int] = None
    updated_count: Optional[int] = None
    deleted_count: Optional[int] = None
    url: Optional[str] = None

    def as_dict(self):
        return {key: value for key, value in asdict(self).items() if value is not None}


def _count(data, key):
    items = data.get(key) if isinstance(data, dict) else None
    return len(items) if isinstance(items, list) else 0


class CatalogSyncEngine:
    """Moves the catalog between one grid and the remote API.

    fetch and push never raise: failures come back as a ``SyncResult`` with
    ``success=False``. ``test_connection`` lets its errors propagate.
    """

    def __init__(self, config, workspace_id, grid, tracker, client):
        self.config = config
        self.workspace_id = workspace_id
        self.grid = grid
        self.tracker = tracker
        self.client = client

    def _session(self):
        token = tokens.issue(self.workspace_id, self.config.secret_key)
        return self.client.make_session(token)

    def fetch(self) -> SyncResult:
        logger.info("Starting product fetch for %s", self.workspace_id)
        url = self.config.endpoint('get_products')
        try:
            require_configured(self.config)
            existing_ids = set(self.grid.product_ids())

            products = self.client.get_products(self._session())
            products = list(reversed(products))  # newest first

            rows = [product_to_row(product) for product in products]
            self.grid.ensure_header(HEADERS)
            self.grid.write_rows(rows)

            fetched_ids = self.grid.product_ids()
            self.tracker.snapshot(fetched_ids)
        except SyncError as exc:
            logger.error("Error fetching products: %s", exc.message)
            return SyncResult(success=False, message=exc.message)
        except Exception as exc:
            logger.exception("Unexpected error fetching products")
            return SyncResult(success=False, message=str(exc))

        already_present = sum(1 for product_id in fetched_ids if product_id in existing_ids)
        logger.info(
            "Fetch complete: %d products (%d already in grid, %d new)",
            len(rows), already_present, len(fetched_ids) - already_present,
        )
        return SyncResult(
            success=True,
            message=f"Successfully fetched {len(rows)} products",
            count=len(rows),
            url=url,
        )

    def push(self, rows, empty_message=NO_ROWS_MESSAGE) -> SyncResult:
        """Push ``rows``, or the rows returned by calling it, along with local deletions."""
        logger.info("Starting product push for %s", self.workspace_id)
        try:
            require_configured(self.config)
            if callable(rows):
                rows = rows()
            rows = [normalize_row(row) for row in rows if not is_blank(row)]
            if not rows:
                raise ValidationError(empty_message)

            deleted_ids = self.tracker.diff(self.grid.product_ids())
            products = [row_to_product(row) for row in rows]
            logger.debug("Pushing %d products, deleting %s", len(products), deleted_ids)

            response = self.client.update_products(self._session(), products, deleted_ids)
            self.tracker.clear()
        except SyncError as exc:
            logger.error("Error updating products: %s", exc.message)
            return SyncResult(success=False, message=exc.message)
        except Exception as exc:
            logger.exception("Unexpected error updating products")
            return SyncResult(success=False, message=str(exc))

        data = response.get('data')
        message = response.get('message') or 'Products updated successfully'

        # The remote may normalise or reject items, so reload what it now holds.
        refresh = self.fetch()
        if not refresh.success:
            logger.warning("Push succeeded but refresh failed: %s", refresh.message)
            message = f"{message} (refresh failed: {refresh.message})"

        result = SyncResult(
            success=True,
            message=message,
            updated_count=_count(data, 'updated'),
            deleted_count=_count(data, 'deleted'),
        )
        logger.info("Push complete: %d updated, %d deleted", result.updated_count, result.deleted_count)
        return result

    def _selected_rows(self, first_row, last_row):
        data = self.grid.read_rows()
        return [
            data[row_number - 2]
            for row_number in range(first_row, last_row + 1)
            if 1 < row_number <= len(data) + 1
        ]

    def push_selected(self, first_row, last_row) -> SyncResult:
        """Push the sheet rows ``first_row``..``last_row`` (1-based, row 1 is the header)."""
        return self.push(
            lambda: self._selected_rows(first_row, last_row),
            empty_message=NO_SELECTION_MESSAGE,
        )

    def push_all(self) -> SyncResult:
        return self.push(self.grid.read_rows, empty_message=NO_ROWS_MESSAGE)

    def test_connection(self) -> SyncResult:
        require_configured(self.config)
        self.client.test_connection(self._session())
        logger.info("Connection to %s successful", self.config.base_url)
        return SyncResult(success=True, message='Connection successful')
