import pytest
from unittest.mock import patch
from django.db import DatabaseError
from issues.models import Project, Issue

URL = "/api/issues/{}"

ISSUE_KEYS = {
    "_id", "projectId", "issue_title", "issue_text", "created_on",
    "updated_on", "created_by", "assigned_to", "open", "status_text",
}


# ---------- POST ----------

@pytest.mark.django_db
def test_create_issue_with_all_fields(api_client):
    resp = api_client.post(URL.format("testproject"), {
        "issue_title": "Test Title",
        "issue_text": "Test issue text",
        "created_by": "Tester",
        "assigned_to": "Dev",
        "status_text": "Pending",
    }, format="json")
    assert resp.status_code == 200
    body = resp.json()
    assert set(body) == ISSUE_KEYS
    assert body["issue_title"] == "Test Title"
    assert body["issue_text"] == "Test issue text"
    assert body["assigned_to"] == "Dev"
    assert body["status_text"] == "Pending"
    assert body["open"] is True
    assert body["created_on"] == body["updated_on"]

    project = Project.objects.get(name="testproject")
    assert body["projectId"] == project.id
    assert Issue.objects.filter(id=body["_id"], project=project).exists()

@pytest.mark.django_db
def test_create_issue_with_only_required_fields(api_client):
    resp = api_client.post(URL.format("testproject"), {
        "issue_title": "Required Title",
        "issue_text": "Required text",
        "created_by": "Tester",
    }, format="json")
    assert resp.status_code == 200
    body = resp.json()
    assert body["assigned_to"] == ""
    assert body["status_text"] == ""
    assert body["open"] is True

@pytest.mark.django_db
def test_create_issue_accepts_form_body(api_client):
    resp = api_client.post(URL.format("formproject"), {
        "issue_title": "T", "issue_text": "X", "created_by": "A",
    })
    assert resp.status_code == 200
    assert resp.json()["issue_title"] == "T"

@pytest.mark.django_db
@pytest.mark.parametrize("payload", [
    {"issue_text": "Missing title"},
    {"issue_title": "T", "issue_text": "X"},
    {"issue_title": "", "issue_text": "X", "created_by": "A"},
    {"issue_title": "T", "issue_text": None, "created_by": "A"},
])
def test_create_issue_with_missing_required_fields(api_client, payload):
    resp = api_client.post(URL.format("newproject"), payload, format="json")
    assert resp.status_code == 200
    assert resp.json() == {"error": "required field(s) missing"}
    assert not Issue.objects.exists()
    assert not Project.objects.exists()

@pytest.mark.django_db
def test_create_issue_reuses_existing_project(api_client, project):
    for title in ("one", "two"):
        api_client.post(URL.format(project.name), {
            "issue_title": title, "issue_text": "X", "created_by": "A",
        }, format="json")
    assert Project.objects.filter(name=project.name).count() == 1
    assert project.issues.count() == 2

@pytest.mark.django_db
def test_create_issue_persistence_error(api_client):
    with patch("issues.services.issue.repo.create", side_effect=DatabaseError("down")):
        resp = api_client.post(URL.format("testproject"), {
            "issue_title": "T", "issue_text": "X", "created_by": "A",
        }, format="json")
    assert resp.status_code == 200
    assert resp.json() == {"error": "could not get"}
    assert not Issue.objects.exists()


# ---------- GET ----------

@pytest.mark.django_db
def test_view_all_issues_on_a_project(api_client, make_issue, other_project):
    mine = [make_issue(), make_issue(issue_title="Second")]
    make_issue(owner=other_project)

    resp = api_client.get(URL.format("testproject"))
    assert resp.status_code == 200
    body = resp.json()
    assert isinstance(body, list)
    assert sorted(x["_id"] for x in body) == sorted(i.id for i in mine)

@pytest.mark.django_db
def test_view_issues_with_one_filter(api_client, make_issue):
    make_issue(created_by="Tester")
    make_issue(created_by="Someone else")

    resp = api_client.get(URL.format("testproject"), {"created_by": "Tester"})
    assert resp.status_code == 200
    body = resp.json()
    assert len(body) == 1
    assert all(x["created_by"] == "Tester" for x in body)

@pytest.mark.django_db
def test_view_issues_with_multiple_filters(api_client, make_issue):
    make_issue(created_by="Tester", issue_title="Test Title")
    make_issue(created_by="Tester", issue_title="Other Title")
    make_issue(created_by="Someone", issue_title="Test Title")

    resp = api_client.get(URL.format("testproject"), {"created_by": "Tester", "issue_title": "Test Title"})
    body = resp.json()
    assert len(body) == 1
    assert body[0]["created_by"] == "Tester"
    assert body[0]["issue_title"] == "Test Title"

@pytest.mark.django_db
def test_view_issues_filtered_by_open_flag(api_client, make_issue):
    closed = make_issue(open=False)
    make_issue()

    resp = api_client.get(URL.format("testproject"), {"open": "false"})
    assert [x["_id"] for x in resp.json()] == [closed.id]

@pytest.mark.django_db
def test_view_issues_filtered_by_id(api_client, issue, make_issue):
    make_issue()
    resp = api_client.get(URL.format("testproject"), {"_id": issue.id})
    assert [x["_id"] for x in resp.json()] == [issue.id]

@pytest.mark.django_db
def test_view_issues_with_unmatchable_filters(api_client, issue):
    assert api_client.get(URL.format("testproject"), {"priority": "high"}).json() == []
    assert api_client.get(URL.format("testproject"), {"open": "maybe"}).json() == []
    assert api_client.get(URL.format("testproject"), {"created_by": "Nobody"}).json() == []

@pytest.mark.django_db
def test_view_issues_of_unknown_project(api_client):
    resp = api_client.get(URL.format("missing"))
    assert resp.status_code == 200
    assert resp.json() == [{"error": "project not found"}]

@pytest.mark.django_db
def test_view_issues_persistence_error(api_client, project):
    with patch("issues.views.issue.ProjectSelector.get_project_by_name", side_effect=DatabaseError("down")):
        resp = api_client.get(URL.format(project.name))
    assert resp.status_code == 200
    assert resp.json() == {"error": "could not get"}


# ---------- PUT ----------

@pytest.mark.django_db
def test_update_one_field(api_client, issue):
    resp = api_client.put(URL.format("testproject"), {"_id": issue.id, "issue_text": "Updated text"}, format="json")
    assert resp.status_code == 200
    assert resp.json() == {"result": "successfully updated", "_id": issue.id}

    issue.refresh_from_db()
    assert issue.issue_text == "Updated text"
    assert issue.issue_title == "Test Title"

@pytest.mark.django_db
def test_update_multiple_fields(api_client, issue):
    before = issue.updated_on
    resp = api_client.put(URL.format("testproject"), {
        "_id": issue.id,
        "issue_title": "Updated title",
        "assigned_to": "Someone",
        "open": False,
    }, format="json")
    assert resp.json() == {"result": "successfully updated", "_id": issue.id}

    issue.refresh_from_db()
    assert issue.issue_title == "Updated title"
    assert issue.assigned_to == "Someone"
    assert issue.open is False
    assert issue.updated_on > before

@pytest.mark.django_db
def test_update_can_close_issue_with_form_body(api_client, issue):
    resp = api_client.put(URL.format("testproject"), {"_id": issue.id, "open": "false"})
    assert resp.json()["result"] == "successfully updated"
    issue.refresh_from_db()
    assert issue.open is False

@pytest.mark.django_db
def test_update_with_missing_id(api_client, issue):
    resp = api_client.put(URL.format("testproject"), {"issue_title": "Fail"}, format="json")
    assert resp.status_code == 200
    assert resp.json() == {"error": "missing _id"}

@pytest.mark.django_db
@pytest.mark.parametrize("extra", [{}, {"issue_title": ""}, {"assigned_to": "", "open": None}, {"priority": "high"}])
def test_update_with_no_fields_to_update(api_client, issue, extra):
    resp = api_client.put(URL.format("testproject"), {"_id": issue.id, **extra}, format="json")
    assert resp.status_code == 200
    assert resp.json() == {"error": "no update field(s) sent", "_id": issue.id}

@pytest.mark.django_db
def test_update_with_invalid_id(api_client, project):
    resp = api_client.put(URL.format("testproject"), {"_id": "invalid123", "issue_title": "Something"}, format="json")
    assert resp.status_code == 200
    assert resp.json() == {"error": "could not update", "_id": "invalid123"}

@pytest.mark.django_db
def test_update_under_unknown_project(api_client, issue):
    resp = api_client.put(URL.format("missing"), {"_id": issue.id, "issue_title": "Something"}, format="json")
    assert resp.json() == {"error": "could not update", "_id": issue.id}
    issue.refresh_from_db()
    assert issue.issue_title == "Test Title"

@pytest.mark.django_db
def test_update_with_uncastable_value(api_client, issue):
    resp = api_client.put(URL.format("testproject"), {"_id": issue.id, "open": "maybe"}, format="json")
    assert resp.json() == {"error": "could not update", "_id": issue.id}

@pytest.mark.django_db
def test_update_persistence_error(api_client, issue):
    with patch("issues.services.issue.repo.save_fields", side_effect=DatabaseError("down")):
        resp = api_client.put(URL.format("testproject"), {"_id": issue.id, "issue_title": "X"}, format="json")
    assert resp.json() == {"error": "could not update", "_id": issue.id}

@pytest.mark.django_db
def test_update_ignores_fields_outside_schema(api_client, issue, other_project):
    resp = api_client.put(URL.format("testproject"), {
        "_id": issue.id,
        "issue_title": "New",
        "projectId": other_project.id,
        "priority": "high",
    }, format="json")
    assert resp.json()["result"] == "successfully updated"
    issue.refresh_from_db()
    assert issue.issue_title == "New"
    assert issue.project_id != other_project.id


# ---------- DELETE ----------

@pytest.mark.django_db
def test_delete_issue_with_valid_id(api_client, issue):
    resp = api_client.delete(URL.format("testproject"), {"_id": issue.id}, format="json")
    assert resp.status_code == 200
    assert resp.json() == {"result": "successfully deleted", "_id": issue.id}
    assert not Issue.objects.filter(id=issue.id).exists()

@pytest.mark.django_db
def test_delete_issue_with_missing_id(api_client, project):
    resp = api_client.delete(URL.format("testproject"), {}, format="json")
    assert resp.status_code == 200
    assert resp.json() == {"error": "missing _id"}

@pytest.mark.django_db
def test_delete_issue_with_invalid_id(api_client, project):
    resp = api_client.delete(URL.format("testproject"), {"_id": "nonexistent123"}, format="json")
    assert resp.status_code == 200
    assert resp.json() == {"error": "could not delete", "_id": "nonexistent123"}

@pytest.mark.django_db
def test_delete_is_not_scoped_to_path_project(api_client, make_issue, other_project):
    foreign = make_issue(owner=other_project)
    resp = api_client.delete(URL.format("testproject"), {"_id": foreign.id}, format="json")
    assert resp.json() == {"result": "successfully deleted", "_id": foreign.id}


# ---------- end to end ----------

@pytest.mark.django_db
def test_issue_lifecycle(api_client):
    created = api_client.post(URL.format("p"), {"issue_title": "T", "issue_text": "X", "created_by": "A"}, format="json")
    assert created.status_code == 200
    body = created.json()
    issue_id = body["_id"]
    assert body["assigned_to"] == ""
    assert body["open"] is True

    listed = api_client.get(URL.format("p")).json()
    assert [x["_id"] for x in listed] == [issue_id]

    updated = api_client.put(URL.format("p"), {"_id": issue_id, "issue_text": "Y"}, format="json")
    assert updated.json() == {"result": "successfully updated", "_id": issue_id}
    assert api_client.get(URL.format("p"), {"_id": issue_id}).json()[0]["issue_text"] == "Y"

    deleted = api_client.delete(URL.format("p"), {"_id": issue_id}, format="json")
    assert deleted.json() == {"result": "successfully deleted", "_id": issue_id}

    assert api_client.get(URL.format("p"), {"_id": issue_id}).json() == []

@pytest.mark.django_db
def test_trailing_slash_is_accepted(api_client, issue):
    resp = api_client.get(URL.format("testproject") + "/")
    assert resp.status_code == 200
    assert [x["_id"] for x in resp.json()] == [issue.id]
