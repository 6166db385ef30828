import pytest
from django.utils import timezone
from rest_framework.test import APIClient
from issues.models import Project, Issue

@pytest.fixture
def api_client():
    return APIClient()

@pytest.fixture
def project(db):
    return Project.objects.create(name="testproject")

@pytest.fixture
def other_project(db):
    return Project.objects.create(name="otherproject")

@pytest.fixture
def make_issue(project):
    def _make(owner=None, **fields):
        now = timezone.now()
        data = {
            "project": owner or project,
            "issue_title": "Test Title",
            "issue_text": "Test issue text",
            "created_by": "Tester",
            "created_on": now,
            "updated_on": now,
        }
        data.update(fields)
        return Issue.objects.create(**data)
    return _make

@pytest.fixture
def issue(make_issue):
    return make_issue(assigned_to="Dev", status_text="Pending")
