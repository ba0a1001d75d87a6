from abc import ABC, abstractmethod

from sheetsync.rows import normalize_row, row_ids


class BaseGrid(ABC):
    @abstractmethod
    def read_header(self) -> list[str]:
        """Return the header row, or an empty list for a blank grid."""

    @abstractmethod
    def read_rows(self) -> list[list[str]]:
        """Return every data row below the header."""

    @abstractmethod
    def write_header(self, headers):
        """Replace the header row."""

    @abstractmethod
    def write_rows(self, rows):
        """Replace every data row in one pass, keeping the header."""

    def ensure_header(self, headers):
        headers = list(headers)
        current = [str(cell) for cell in self.read_header()[:len(headers)]]
        if current == headers:
            return False
        self.write_header(headers)
        return True

    def product_ids(self):
        return row_ids(normalize_row(row) for row in self.read_rows())
