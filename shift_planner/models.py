"""
Shift Planner Models - Restaurant Scheduler

Dieses Modul enthält die Datenmodelle für das Schichtplanungs-System.

Models:
- Shift: Einteilung eines Mitarbeiters für eine Rolle in einem Restaurant
  an einem Kalendertag

Schichten werden nie direkt bearbeitet: Änderungen erfolgen über Löschen
und Neuanlegen.

Author: Scheduler Development Team
Version: 1.0.0
"""

from django.db import models
from core.employees.models import Employee, Restaurant, Role  # type: ignore


class Shift(models.Model):
    """Geplante Schicht pro Mitarbeiter, Restaurant und Tag."""

    restaurant = models.ForeignKey(
        Restaurant,
        on_delete=models.CASCADE,
        related_name="shifts",
        verbose_name="Restaurant",
    )
    employee = models.ForeignKey(
        Employee,
        on_delete=models.CASCADE,
        related_name="shifts",
        verbose_name="Mitarbeiter",
    )
    date = models.DateField(verbose_name="Datum")
    role = models.CharField(
        max_length=10,
        choices=Role.choices,
        verbose_name="Rolle",
    )
    start_time = models.TimeField(null=True, blank=True, verbose_name="Beginn")
    end_time = models.TimeField(null=True, blank=True, verbose_name="Ende")
    notes = models.CharField(
        max_length=255,
        blank=True,
        verbose_name="Notiz",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Schicht"
        verbose_name_plural = "Schichten"
        ordering = ["date", "role", "start_time"]
        constraints = [
            models.UniqueConstraint(
                fields=["employee", "restaurant", "date"],
                name="unique_shift_per_employee_restaurant_day",
            ),
        ]
        indexes = [
            models.Index(fields=["restaurant", "date"], name="shift_restaurant_date_idx"),
            models.Index(fields=["employee", "date"], name="shift_employee_date_idx"),
        ]

    def __str__(self):
        return f"{self.employee.name} – {self.restaurant.name} {self.date}: {self.role}"
