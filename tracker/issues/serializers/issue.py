# ============================================
# issues/serializers/issue.py
# ============================================
from rest_framework import serializers
from issues.models import Issue


def _text(**kwargs):
    # Values are stored exactly as sent
    return serializers.CharField(trim_whitespace=False, **kwargs)


class IssueCreateSerializer(serializers.Serializer):
    issue_title = _text(max_length=255)
    issue_text = _text()
    created_by = _text(max_length=255)
    assigned_to = _text(max_length=255, allow_blank=True, allow_null=True, default='')
    status_text = _text(max_length=255, allow_blank=True, allow_null=True, default='')


class IssueUpdateSerializer(serializers.Serializer):
    issue_title = _text(max_length=255, required=False)
    issue_text = _text(required=False)
    created_by = _text(max_length=255, required=False)
    assigned_to = _text(max_length=255, required=False, allow_blank=True)
    status_text = _text(max_length=255, required=False, allow_blank=True)
    open = serializers.BooleanField(required=False)


class IssueFilterSerializer(serializers.Serializer):
    """Casts GET query parameters to exact-match lookups on Issue fields"""
    _id = _text(source='id', required=False, allow_blank=True)
    projectId = _text(source='project_id', required=False, allow_blank=True)
    issue_title = _text(required=False, allow_blank=True)
    issue_text = _text(required=False, allow_blank=True)
    created_by = _text(required=False, allow_blank=True)
    assigned_to = _text(required=False, allow_blank=True)
    status_text = _text(required=False, allow_blank=True)
    open = serializers.BooleanField(required=False)
    created_on = serializers.DateTimeField(required=False)
    updated_on = serializers.DateTimeField(required=False)

    def validate(self, attrs):
        unknown = set(self.initial_data) - set(self.fields)
        if unknown:
            raise serializers.ValidationError(
                f"Unknown filter field(s): {', '.join(sorted(unknown))}"
            )
        return attrs


class IssueOutputSerializer(serializers.ModelSerializer):
    _id = serializers.CharField(source='id', read_only=True)
    projectId = serializers.CharField(source='project_id', read_only=True)

    class Meta:
        model = Issue
        fields = [
            '_id', 'projectId', 'issue_title', 'issue_text',
            'created_on', 'updated_on', 'created_by', 'assigned_to',
            'open', 'status_text'
        ]
