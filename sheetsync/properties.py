from sheetsync.models import StoredProperty


class PropertyStore:
    """String key-value properties for one owner (a user or a document)."""

    def __init__(self, scope, owner):
        self.scope = scope
        self.owner = str(owner)

    def _queryset(self):
        return StoredProperty.objects.filter(scope=self.scope, owner=self.owner)

    def get(self, key, default=None):
        row = self._queryset().filter(key=key).values_list('value', flat=True).first()
        return default if row is None else row

    def set(self, key, value):
        StoredProperty.objects.update_or_create(
            scope=self.scope,
            owner=self.owner,
            key=key,
            defaults={'value': str(value)},
        )

    def delete(self, key):
        self._queryset().filter(key=key).delete()

    def keys(self):
        return list(self._queryset().order_by('key').values_list('key', flat=True))


def user_properties(user_id):
    return PropertyStore(StoredProperty.SCOPE_USER, user_id)


def document_properties(document_id):
    return PropertyStore(StoredProperty.SCOPE_DOCUMENT, document_id)
