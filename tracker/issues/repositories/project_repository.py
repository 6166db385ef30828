# -*- coding: utf-8 -*-
"""
Repository layer for Project (DB only).
"""
from __future__ import annotations
from typing import Optional, Dict, Any
from django.db import transaction

from issues.models import Project


# ============== Queries ==============
def get_by_name(name: str) -> Optional[Project]:
    # Duplicates can exist after a create race; the oldest one wins
    return Project.objects.filter(name=name).order_by("created_on", "id").first()


# ============== Mutations ==============
@transaction.atomic
def create(data: Dict[str, Any]) -> Project:
    return Project.objects.create(**data)
