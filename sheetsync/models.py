from django.db import models


class StoredProperty(models.Model):
    SCOPE_USER = 'user'
    SCOPE_DOCUMENT = 'document'
    SCOPE_CHOICES = [
        (SCOPE_USER, 'User'),
        (SCOPE_DOCUMENT, 'Document'),
    ]

    scope = models.CharField(max_length=16, choices=SCOPE_CHOICES)
    owner = models.CharField(max_length=255)
    key = models.CharField(max_length=100)
    value = models.TextField(blank=True, default='')
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['scope', 'owner', 'key'], name='unique_property_per_owner'),
        ]

    def __str__(self):
        return f"{self.scope}:{self.owner}:{self.key}"
