# ============================================
# issues/selectors/issue.py
# ============================================
from typing import Any, Optional

from django.db.models import QuerySet

from issues.models import Issue, Project
from issues.repositories import issue_repository as repo


class IssueSelector:

    @staticmethod
    def get_issue_by_id(issue_id: str) -> Optional[Issue]:
        """Get single issue by its global id"""
        return repo.get_by_id(issue_id)

    @staticmethod
    def get_issues_list(project: Project, **filters: Any) -> QuerySet:
        """
        Issues owned by `project` matching every filter exactly.
        Filter keys are model field names with already-cast values.
        """
        return repo.filter_by_project(project, filters)
