"""
Staff Management App Configuration - Restaurant Scheduler

Dieses Modul enthält die Django App-Konfiguration für die Stammdaten des
Schichtplaners. Die App employees verwaltet Restaurants, Mitarbeiter, deren
Restaurant-Zuordnungen und Login-Konten.

Author: Scheduler Development Team
Version: 1.0.0
"""

from django.apps import AppConfig


class EmployeesConfig(AppConfig):
    """
    Django AppConfig für das Staff Management Modul.

    Initialisiert die App und stellt Metadaten bereit.
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core.employees'
    label = 'employees'
    verbose_name = 'Restaurants & Mitarbeiter'
