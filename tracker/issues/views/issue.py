# ============================================
# issues/views/issue.py
# ============================================
import logging

from django.db import DatabaseError
from rest_framework.response import Response
from rest_framework.views import APIView

from issues.exceptions import IssueTrackerError
from issues.models import Issue
from issues.serializers.issue import (
    IssueCreateSerializer,
    IssueUpdateSerializer,
    IssueFilterSerializer,
    IssueOutputSerializer
)
from issues.selectors.issue import IssueSelector
from issues.selectors.project import ProjectSelector
from issues.services.issue import IssueService

from .utils import (
    extend_schema, extend_schema_view, OpenApiResponse,
    ErrorSerializer, ResultSerializer, outcome, path_str, q_str, q_bool, q_datetime,
    body_as_dict, error_body, result_body,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('issue_title', 'issue_text', 'created_by')

PROJECT_PARAM = path_str("project", "Project name; created on the first POST")


def _is_sent(value) -> bool:
    # `open: false` counts as an update, a blank string does not
    return value is not None and value != ''


@extend_schema_view(
    get=extend_schema(
        tags=["Issue"],
        summary="List issues of a project (query params are exact-match filters)",
        parameters=[
            PROJECT_PARAM,
            q_str("_id", "Issue id"),
            q_str("projectId", "Owning project id"),
            q_str("issue_title", "Title"),
            q_str("issue_text", "Text"),
            q_str("created_by", "Author"),
            q_str("assigned_to", "Assignee"),
            q_str("status_text", "Status text"),
            q_bool("open", "Open flag"),
            q_datetime("created_on", "Creation time"),
            q_datetime("updated_on", "Last update time"),
        ],
        responses={200: OpenApiResponse(IssueOutputSerializer(many=True))},
    ),
    post=extend_schema(
        tags=["Issue"],
        summary="Create an issue (creates the project if needed)",
        parameters=[PROJECT_PARAM],
        request=IssueCreateSerializer,
        responses=outcome("IssueCreateOutcome", IssueOutputSerializer, ErrorSerializer),
    ),
    put=extend_schema(
        tags=["Issue"],
        summary="Update some fields of an issue",
        parameters=[PROJECT_PARAM],
        request=IssueUpdateSerializer,
        responses=outcome("IssueUpdateOutcome", ResultSerializer, ErrorSerializer),
    ),
    delete=extend_schema(
        tags=["Issue"],
        summary="Delete an issue by id",
        parameters=[PROJECT_PARAM],
        responses=outcome("IssueDeleteOutcome", ResultSerializer, ErrorSerializer),
    ),
)
class IssueResourceAPIView(APIView):
    """
    GET: List issues of a project, filtered by query params
    POST: Create an issue
    PUT: Update an issue
    DELETE: Delete an issue

    Path params:
    - project: string

    Every outcome is answered with HTTP 200; failures carry an `error` key.
    """

    def get(self, request, project):
        try:
            found = ProjectSelector.get_project_by_name(project)
            if not found:
                return Response([error_body("project not found")])

            filters = IssueFilterSerializer(data=request.query_params.dict())
            if not filters.is_valid():
                # A value that cannot be cast, or a field the schema lacks, matches nothing
                logger.info("[issues] unmatched filter on %s: %s", project, filters.errors)
                return Response([])

            issues = IssueSelector.get_issues_list(found, **filters.validated_data)
            return Response(IssueOutputSerializer(issues, many=True).data)
        except DatabaseError:
            logger.exception("[issues] list failed for project=%s", project)
            return Response(error_body("could not get"))

    def post(self, request, project):
        data = body_as_dict(request)
        if any(not data.get(field) for field in REQUIRED_FIELDS):
            return Response(error_body("required field(s) missing"))

        serializer = IssueCreateSerializer(data=data)
        if not serializer.is_valid():
            logger.warning("[issues] create rejected for project=%s: %s", project, serializer.errors)
            return Response(error_body("could not get"))

        try:
            issue = IssueService.create_issue(
                project_name=project,
                **serializer.validated_data
            )
        except DatabaseError:
            logger.exception("[issues] create failed for project=%s", project)
            return Response(error_body("could not get"))

        return Response(IssueOutputSerializer(issue).data)

    def put(self, request, project):
        data = body_as_dict(request)
        issue_id = data.get('_id')
        if not issue_id:
            return Response(error_body("missing _id"))

        sent = {k: data[k] for k in Issue.MUTABLE_FIELDS if k in data and _is_sent(data[k])}
        if not sent:
            return Response(error_body("no update field(s) sent", _id=issue_id))

        serializer = IssueUpdateSerializer(data=sent)
        if not serializer.is_valid():
            logger.warning("[issues] update rejected for id=%s: %s", issue_id, serializer.errors)
            return Response(error_body("could not update", _id=issue_id))

        try:
            IssueService.update_issue(
                project_name=project,
                issue_id=str(issue_id),
                changes=serializer.validated_data
            )
        except IssueTrackerError as ex:
            logger.warning("[issues] update failed: %s", ex)
            return Response(error_body("could not update", _id=issue_id))
        except DatabaseError:
            logger.exception("[issues] update failed for id=%s", issue_id)
            return Response(error_body("could not update", _id=issue_id))

        return Response(result_body("successfully updated", _id=issue_id))

    def delete(self, request, project):
        data = body_as_dict(request)
        issue_id = data.get('_id')
        if not issue_id:
            return Response(error_body("missing _id"))

        try:
            IssueService.delete_issue(issue_id=str(issue_id))
        except IssueTrackerError as ex:
            logger.warning("[issues] delete failed: %s", ex)
            return Response(error_body("could not delete", _id=issue_id))
        except DatabaseError:
            logger.exception("[issues] delete failed for id=%s", issue_id)
            return Response(error_body("could not delete", _id=issue_id))

        return Response(result_body("successfully deleted", _id=issue_id))
