# ============================================
# issues/selectors/project.py
# ============================================
from typing import Optional

from issues.models import Project
from issues.repositories import project_repository as repo


class ProjectSelector:

    @staticmethod
    def get_project_by_name(name: str) -> Optional[Project]:
        """Get project by its URL name"""
        return repo.get_by_name(name)
