# ============================================
# issues/urls.py
# ============================================
from django.urls import re_path
from issues.views.issue import IssueResourceAPIView

app_name = 'issues'

urlpatterns = [
    # /api/issues/<project>  (trailing slash optional)
    re_path(r'^(?P<project>[^/]+)/?$', IssueResourceAPIView.as_view(), name='issue-resource'),
]
