# ============================================
# issues/services/issue.py
# ============================================
import logging
from datetime import timedelta
from typing import Any, Dict

from django.db import transaction
from django.utils import timezone

from issues.exceptions import IssueNotDeleted, IssueNotFound, ProjectNotFound
from issues.models import Issue
from issues.repositories import issue_repository as repo
from issues.selectors.issue import IssueSelector
from issues.selectors.project import ProjectSelector
from issues.services.project import ProjectService

logger = logging.getLogger(__name__)


class IssueService:

    @staticmethod
    def _next_updated_on(issue: Issue):
        """Current time, bumped past the stored value on clock ties"""
        now = timezone.now()
        if issue.updated_on and now <= issue.updated_on:
            now = issue.updated_on + timedelta(microseconds=1)
        return now

    @staticmethod
    @transaction.atomic
    def create_issue(
        *,
        project_name: str,
        issue_title: str,
        issue_text: str,
        created_by: str,
        assigned_to: str = '',
        status_text: str = ''
    ) -> Issue:
        """Create an open issue, creating its project on first use"""
        project, _ = ProjectService.get_or_create_project(name=project_name)

        now = timezone.now()
        issue = repo.create({
            'project': project,
            'issue_title': issue_title,
            'issue_text': issue_text,
            'created_by': created_by,
            'assigned_to': assigned_to or '',
            'status_text': status_text or '',
            'open': True,
            'created_on': now,
            'updated_on': now,
        })

        logger.info("[issues] issue created: project=%s id=%s", project_name, issue.id)
        return issue

    @staticmethod
    def update_issue(
        *,
        project_name: str,
        issue_id: str,
        changes: Dict[str, Any]
    ) -> Issue:
        """
        Apply `changes` to the issue with the given global id.
        Only mutable fields are written; ownership and creation time never change.
        """
        if not ProjectSelector.get_project_by_name(project_name):
            raise ProjectNotFound(project_name)

        issue = IssueSelector.get_issue_by_id(issue_id)
        if not issue:
            raise IssueNotFound(issue_id)

        patch = {k: v for k, v in changes.items() if k in Issue.MUTABLE_FIELDS}
        patch['updated_on'] = IssueService._next_updated_on(issue)

        issue = repo.save_fields(
            issue,
            patch,
            allowed=set(Issue.MUTABLE_FIELDS) | {'updated_on'}
        )

        logger.info("[issues] issue updated: id=%s fields=%s", issue_id, sorted(patch))
        return issue

    @staticmethod
    def delete_issue(*, issue_id: str) -> None:
        """Delete by global id, whatever project owns the issue"""
        if not repo.delete_by_id(issue_id):
            raise IssueNotDeleted(issue_id)

        logger.info("[issues] issue deleted: id=%s", issue_id)
