from django.contrib import admin
from .models import Project, Issue

@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ("name", "id", "created_on")
    search_fields = ("name",)

@admin.register(Issue)
class IssueAdmin(admin.ModelAdmin):
    list_display = ("issue_title", "project", "created_by", "assigned_to", "open", "updated_on")
    list_filter = ("open",)
    search_fields = ("issue_title", "issue_text", "created_by", "assigned_to")
    readonly_fields = ("id", "created_on")
