import json
import logging

logger = logging.getLogger(__name__)

STORED_IDS_KEY = 'STORED_PRODUCT_IDS'


class DeletionTracker:
    """Remembers which product ids the grid held after the last fetch."""

    def __init__(self, store):
        self.store = store

    def snapshot(self, current_ids):
        ids = []
        seen = set()
        for product_id in current_ids:
            product_id = str(product_id).strip()
            if product_id and product_id not in seen:
                seen.add(product_id)
                ids.append(product_id)
        self.store.set(STORED_IDS_KEY, json.dumps(ids))
        logger.debug("Stored snapshot of %d product ids", len(ids))

    def stored_ids(self):
        raw = self.store.get(STORED_IDS_KEY)
        if not raw:
            return []
        try:
            ids = json.loads(raw)
        except ValueError:
            logger.warning("Ignoring unreadable %s value", STORED_IDS_KEY)
            return []
        if not isinstance(ids, list) or not all(
            isinstance(product_id, (str, int)) and not isinstance(product_id, bool) for product_id in ids
        ):
            logger.warning("Ignoring %s value that is not a list of ids", STORED_IDS_KEY)
            return []
        return [str(product_id) for product_id in ids]

    def diff(self, current_ids):
        """Ids from the snapshot that are missing from ``current_ids``, in snapshot order."""
        current = {str(product_id).strip() for product_id in current_ids}
        return [product_id for product_id in self.stored_ids() if product_id not in current]

    def clear(self):
        self.store.delete(STORED_IDS_KEY)
