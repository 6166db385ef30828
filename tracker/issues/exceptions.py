# ============================================
# issues/exceptions.py
# ============================================


class IssueTrackerError(Exception):
    """Base class for outcomes the issue resource reports in the body."""


class ProjectNotFound(IssueTrackerError):
    def __init__(self, name: str):
        super().__init__(f"project {name!r} not found")
        self.name = name


class IssueNotFound(IssueTrackerError):
    def __init__(self, issue_id: str):
        super().__init__(f"issue {issue_id!r} not found")
        self.issue_id = issue_id


class IssueNotDeleted(IssueTrackerError):
    def __init__(self, issue_id: str):
        super().__init__(f"issue {issue_id!r} was not deleted")
        self.issue_id = issue_id
