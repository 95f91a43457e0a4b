"""
Staff Management Admin - Restaurant Scheduler

Dieses Modul enthält die Django Admin-Konfiguration für Restaurants,
Mitarbeiter und deren Restaurant-Zuordnungen.

Admin-Klassen:
- RestaurantAdmin: Verwaltung von Restaurants
- EmployeeAdmin: Verwaltung von Mitarbeitern mit Inline-Zuordnungen
- EmployeeRestaurantAdmin: Übersicht aller Zuordnungen

Author: Scheduler Development Team
Version: 1.0.0
"""

from django.contrib import admin
from .models import Employee, EmployeeRestaurant, Restaurant


class EmployeeRestaurantInline(admin.TabularInline):
    model = EmployeeRestaurant
    extra = 0
    fields = ["restaurant", "is_primary", "created_at"]
    readonly_fields = ["created_at"]


@admin.register(Restaurant)
class RestaurantAdmin(admin.ModelAdmin):
    list_display = ["name", "address", "phone", "created_at"]
    search_fields = ["name", "address"]
    ordering = ["name"]
    readonly_fields = ["created_at", "updated_at"]

    fieldsets = (
        ("Grundinformationen", {"fields": ("name", "address", "phone")}),
        ("Rollen", {"fields": ("special_roles",)}),
        (
            "Zeitstempel",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ["name", "email", "role_list", "has_account", "created_at"]
    search_fields = ["name", "email", "restaurant_links__restaurant__name"]
    ordering = ["name"]
    readonly_fields = ["created_at", "updated_at"]
    inlines = [EmployeeRestaurantInline]

    fieldsets = (
        ("Persönliche Daten", {"fields": ("name", "email", "phone")}),
        ("Rollen", {"fields": ("roles",)}),
        ("Login", {"fields": ("user",)}),
        (
            "Zeitstempel",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )

    # Anzahl der Einträge pro Seite
    list_per_page = 25

    def role_list(self, obj):
        return ", ".join(obj.roles or [])

    role_list.short_description = "Rollen"

    def has_account(self, obj):
        return obj.has_account

    has_account.boolean = True
    has_account.short_description = "Konto"


@admin.register(EmployeeRestaurant)
class EmployeeRestaurantAdmin(admin.ModelAdmin):
    list_display = ("employee", "restaurant", "is_primary", "created_at")
    list_filter = ("restaurant", "is_primary")
    search_fields = ("employee__name", "employee__email", "restaurant__name")
