# ============================================
# issues/services/project.py
# ============================================
import logging
from typing import Tuple

from issues.models import Project
from issues.repositories import project_repository as repo

logger = logging.getLogger(__name__)


class ProjectService:

    @staticmethod
    def get_or_create_project(*, name: str) -> Tuple[Project, bool]:
        """
        Find the project named `name`, creating it when missing.
        Check-then-act: two concurrent first creates may both insert.
        """
        project = repo.get_by_name(name)
        if project:
            return project, False

        project = repo.create({'name': name})
        logger.info("[issues] project created: name=%s id=%s", name, project.id)
        return project, True
