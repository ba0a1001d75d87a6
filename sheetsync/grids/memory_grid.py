from .base import BaseGrid


class MemoryGrid(BaseGrid):
    def __init__(self, header=None, rows=None, document_id=None):
        self.document_id = document_id
        self.header = list(header or [])
        self.rows = [list(row) for row in rows or []]
        self.frozen_rows = 1 if self.header else 0

    def read_header(self) -> list[str]:
        return list(self.header)

    def read_rows(self) -> list[list[str]]:
        return [list(row) for row in self.rows]

    def write_header(self, headers):
        self.header = list(headers)
        self.frozen_rows = 1

    def write_rows(self, rows):
        self.rows = [list(row) for row in rows]
