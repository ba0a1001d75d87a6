from django.test import SimpleTestCase

from sheetsync.rows import (
    FIELDS, HEADERS, format_cell, is_blank, normalize_row, product_to_row, row_ids, row_to_product,
)


def _product():
    return {
        "id": 101, "type": "variation", "parent_id": 100, "name": "Mug - Red",
        "sku": "MUG-R", "attributes": ["Color: Red", "Size: L"],
        "regular_price": "12.00", "sale_price": None, "stock_quantity": 5,
        "status": "publish", "permalink": "https://shop.test/mug",
    }


class TestLayout(SimpleTestCase):
    def test_header_order(self):
        self.assertEqual(HEADERS, [
            'Product ID', 'Type', 'Parent ID', 'Name', 'SKU',
            'Attributes', 'Regular Price', 'Sale Price', 'Stock', 'Status',
        ])
        self.assertEqual(len(FIELDS), len(HEADERS))


class TestProductToRow(SimpleTestCase):
    def test_column_order(self):
        row = product_to_row(_product())
        self.assertEqual(row, [
            "101", "variation", "100", "Mug - Red", "MUG-R",
            "Color: Red, Size: L", "12.00", "", "5", "publish",
        ])

    def test_missing_fields_are_empty(self):
        row = product_to_row({"id": 1})
        self.assertEqual(row[0], "1")
        self.assertEqual(row[1:], [""] * 9)

    def test_format_cell(self):
        self.assertEqual(format_cell(None), "")
        self.assertEqual(format_cell(True), "TRUE")
        self.assertEqual(format_cell({"color": "red", "size": "L"}), "color: red, size: L")
        self.assertEqual(format_cell(3.5), "3.5")


class TestRowToProduct(SimpleTestCase):
    def test_maps_fields(self):
        product = row_to_product(["7", "simple", "", "Tea", "TEA", "", "4.50", "3.99", "12", "draft"])
        self.assertEqual(product, {
            "id": "7", "type": "simple", "parent_id": "", "name": "Tea", "sku": "TEA",
            "attributes": "", "regular_price": "4.50", "sale_price": "3.99",
            "stock_quantity": "12", "status": "draft",
        })

    def test_short_rows_are_padded(self):
        self.assertEqual(normalize_row([" 7 ", "simple"]), ["7", "simple"] + [""] * 8)

    def test_long_rows_are_cut(self):
        self.assertEqual(len(normalize_row(["x"] * 14)), 10)


class TestRowHelpers(SimpleTestCase):
    def test_is_blank(self):
        self.assertTrue(is_blank(["", "  ", None]))
        self.assertTrue(is_blank([]))
        self.assertFalse(is_blank(["", "Tea"]))

    def test_row_ids_skip_blanks(self):
        rows = [["1", "a"], ["", "b"], [" 3 "], []]
        self.assertEqual(row_ids(rows), ["1", "3"])
