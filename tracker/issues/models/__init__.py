# ============================================
# issues/models/__init__.py
# ============================================
from .mixins import DocumentModel, generate_object_id
from .project import Project
from .issue import Issue

__all__ = [
    'DocumentModel',
    'generate_object_id',
    'Project',
    'Issue',
]
