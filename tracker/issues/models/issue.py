# ============================================
# issues/models/issue.py
# ============================================
from django.db import models
from django.utils import timezone

from .mixins import DocumentModel


class Issue(DocumentModel):
    project = models.ForeignKey(
        'Project',
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name='issues'
    )
    issue_title = models.CharField(max_length=255)
    issue_text = models.TextField()
    created_by = models.CharField(max_length=255)
    assigned_to = models.CharField(max_length=255, blank=True, default='')
    status_text = models.CharField(max_length=255, blank=True, default='')
    open = models.BooleanField(default=True)
    created_on = models.DateTimeField(default=timezone.now)
    updated_on = models.DateTimeField(default=timezone.now)

    # Fields a client may change through an update
    MUTABLE_FIELDS = (
        'issue_title',
        'issue_text',
        'created_by',
        'assigned_to',
        'status_text',
        'open',
    )

    class Meta:
        db_table = 'issues'
        ordering = ['created_on']
        indexes = [
            models.Index(fields=['project', 'created_on'], name='issues_project_created_idx'),
        ]

    def __str__(self):
        return f"{self.id} - {self.issue_title}"
