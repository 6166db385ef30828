# ============================================
# issues/models/project.py
# ============================================
from django.db import models
from django.utils import timezone

from .mixins import DocumentModel


class Project(DocumentModel):
    # Not unique: find-or-create by name is a plain check-then-act
    name = models.CharField(max_length=255, db_index=True)
    created_on = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'projects'
        ordering = ['created_on']

    def __str__(self):
        return self.name
