"""
Shift Planner Admin - Restaurant Scheduler

Dieses Modul enthält die Django Admin-Konfiguration für Schichten.

Schichten werden im Admin nur angezeigt und gelöscht; neue Schichten
laufen über die API, damit der Assignment Rule Checker greift.

Author: Scheduler Development Team
Version: 1.0.0
"""

from django.contrib import admin
from .models import Shift


@admin.register(Shift)
class ShiftAdmin(admin.ModelAdmin):
    list_display = ["date", "restaurant", "employee", "role", "start_time", "end_time"]
    list_filter = ["restaurant", "role", "date"]
    search_fields = ["employee__name", "restaurant__name", "notes"]
    date_hierarchy = "date"
    ordering = ["-date", "restaurant__name"]
    readonly_fields = [
        "restaurant",
        "employee",
        "date",
        "role",
        "start_time",
        "end_time",
        "notes",
        "created_at",
    ]
    list_per_page = 50

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
