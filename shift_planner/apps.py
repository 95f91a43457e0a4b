"""
Shift Planner App Configuration - Restaurant Scheduler

Dieses Modul enthält die Django App-Konfiguration für die Schichtplanung.
Die App stellt Schichten, Regelprüfung und Kalenderansichten bereit.

Features:
- Bereitstellung von Schichtplanungs-Views und Models
- Registrierung der Signal-Handler für die Cache-Invalidierung

Author: Scheduler Development Team
Version: 1.0.0
"""

from django.apps import AppConfig


class ShiftPlannerConfig(AppConfig):
    """
    Django AppConfig für das Shift Planner Modul.

    Initialisiert die App und verbindet die Signal-Handler.
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'shift_planner'
    verbose_name = 'Shift Planner'

    def ready(self):
        # Signal-Handler registrieren (Cache-Invalidierung bei Schreibzugriffen)
        from . import signals  # noqa: F401
