HEADERS = [
    'Product ID', 'Type', 'Parent ID', 'Name', 'SKU',
    'Attributes', 'Regular Price', 'Sale Price', 'Stock', 'Status',
]

FIELDS = [
    'id', 'type', 'parent_id', 'name', 'sku',
    'attributes', 'regular_price', 'sale_price', 'stock_quantity', 'status',
]

ID_COLUMN = 0


def format_cell(value):
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'TRUE' if value else 'FALSE'
    if isinstance(value, (list, tuple)):
        return ', '.join(format_cell(item) for item in value)
    if isinstance(value, dict):
        return ', '.join(f"{key}: {format_cell(item)}" for key, item in value.items())
    return str(value)


def product_to_row(product):
    return [format_cell(product.get(field)) for field in FIELDS]


def normalize_row(row):
    """Pad or cut ``row`` to the column count, cells as stripped strings."""
    cells = [format_cell(cell).strip() for cell in list(row)[:len(FIELDS)]]
    return cells + [''] * (len(FIELDS) - len(cells))


def row_to_product(row):
    return dict(zip(FIELDS, normalize_row(row)))


def is_blank(row):
    return not any(format_cell(cell).strip() for cell in row)


def row_id(row):
    if not row:
        return ''
    return format_cell(row[ID_COLUMN]).strip()


def row_ids(rows):
    return [pid for pid in (row_id(row) for row in rows) if pid]
