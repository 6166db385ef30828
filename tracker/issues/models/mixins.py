# ============================================
# issues/models/mixins.py
# ============================================
import uuid

from django.db import models


def generate_object_id() -> str:
    """24 hex chars, same shape as a document-store object id."""
    return uuid.uuid4().hex[:24]


class DocumentModel(models.Model):
    id = models.CharField(
        primary_key=True,
        max_length=24,
        default=generate_object_id,
        editable=False
    )

    class Meta:
        abstract = True
