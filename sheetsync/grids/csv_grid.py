import csv
import logging
from pathlib import Path

from django.conf import settings

from .base import BaseGrid

logger = logging.getLogger(__name__)


class CsvFileGrid(BaseGrid):
    """Grid kept in a CSV file; the first line is the header."""

    def __init__(self, path=None, document_id=None):
        if path:
            self.path = Path(path)
        else:
            self.path = Path(settings.SHEETSYNC_GRID_DIR) / f"{document_id or 'default'}.csv"

    def _read_all(self):
        if not self.path.exists():
            return []
        with open(self.path, 'r', encoding='utf-8', newline='') as f:
            return [row for row in csv.reader(f)]

    def _write_all(self, header, rows):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8', newline='') as f:
            writer = csv.writer(f)
            writer.writerow(header)
            writer.writerows(rows)
        logger.debug("Wrote %d rows to %s", len(rows), self.path)

    def read_header(self) -> list[str]:
        lines = self._read_all()
        return lines[0] if lines else []

    def read_rows(self) -> list[list[str]]:
        return self._read_all()[1:]

    def write_header(self, headers):
        self._write_all(list(headers), self.read_rows())

    def write_rows(self, rows):
        self._write_all(self.read_header(), rows)
