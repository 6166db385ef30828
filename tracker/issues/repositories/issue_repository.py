# -*- coding: utf-8 -*-
"""
Repository layer for Issue (DB only).
"""
from __future__ import annotations
from typing import Optional, Dict, Any, List
from django.db import transaction
from django.db.models import QuerySet

from issues.models import Issue, Project


# ============== Queries ==============
def get_by_id(issue_id: str) -> Optional[Issue]:
    return Issue.objects.filter(id=issue_id).first()

def filter_by_project(project: Project, lookups: Dict[str, Any]) -> QuerySet[Issue]:
    return Issue.objects.filter(project=project, **lookups).order_by("created_on", "id")


# ============== Mutations ==============
@transaction.atomic
def create(data: Dict[str, Any]) -> Issue:
    return Issue.objects.create(**data)

@transaction.atomic
def save_fields(obj: Issue, patch: Dict[str, Any], allowed: Optional[set] = None) -> Issue:
    fields: List[str] = []
    for k, v in patch.items():
        if (allowed is None) or (k in allowed):
            setattr(obj, k, v); fields.append(k)
    if fields:
        obj.save(update_fields=fields)
    return obj

@transaction.atomic
def delete_by_id(issue_id: str) -> int:
    deleted, _ = Issue.objects.filter(id=issue_id).delete()
    return deleted
