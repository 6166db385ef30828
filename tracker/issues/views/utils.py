# views/utils.py
"""
Shared tooling for the issue resource views.
Usage in your views:
    from .utils import (
        extend_schema, extend_schema_view, OpenApiResponse,
        ErrorSerializer, ResultSerializer, outcome, path_str, q_str, q_bool,
        body_as_dict, error_body, result_body,
    )
"""
from typing import Any, Dict

from drf_spectacular.utils import (
    extend_schema, extend_schema_view,
    OpenApiParameter, OpenApiResponse, PolymorphicProxySerializer, inline_serializer,
)
from drf_spectacular.types import OpenApiTypes
from rest_framework import serializers

# ---- Reusable body schemas (every outcome is a 200)
ErrorSerializer = inline_serializer(
    name="IssueError",
    fields={
        "error": serializers.CharField(),
        "_id": serializers.CharField(required=False),
    }
)

ResultSerializer = inline_serializer(
    name="IssueResult",
    fields={
        "result": serializers.CharField(),
        "_id": serializers.CharField(),
    }
)

# ---- Convenience for the single 200 response

def outcome(name: str, *serializer_classes):
    """Build a {200: ...} mapping whose body is one of the given shapes."""
    proxy = PolymorphicProxySerializer(
        component_name=name,
        serializers=list(serializer_classes),
        resource_type_field_name=None,
    )
    return {200: OpenApiResponse(proxy)}

# ---- Param helpers

def path_str(name: str, description: str):
    return OpenApiParameter(name, OpenApiTypes.STR, OpenApiParameter.PATH, description=description)

def q_str(name: str, description: str, required: bool = False):
    return OpenApiParameter(name, OpenApiTypes.STR, OpenApiParameter.QUERY, required=required, description=description)

def q_bool(name: str, description: str, required: bool = False):
    return OpenApiParameter(name, OpenApiTypes.BOOL, OpenApiParameter.QUERY, required=required, description=description)

def q_datetime(name: str, description: str, required: bool = False):
    return OpenApiParameter(name, OpenApiTypes.DATETIME, OpenApiParameter.QUERY, required=required, description=description)

# ---- Request / response helpers

def body_as_dict(request) -> Dict[str, Any]:
    """Request body as a flat dict; form bodies keep the last value per key."""
    data = request.data
    if hasattr(data, "dict"):
        return data.dict()
    if isinstance(data, dict):
        return dict(data)
    return {}


def error_body(message: str, **extra) -> Dict[str, Any]:
    return {"error": message, **extra}


def result_body(message: str, **extra) -> Dict[str, Any]:
    return {"result": message, **extra}
