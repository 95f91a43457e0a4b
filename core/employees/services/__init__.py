"""
Staff Services Package - Restaurant Scheduler

Dieses Paket enthält die Services für die Verwaltung von Restaurants,
Mitarbeitern, Standort-Zuordnungen und Login-Konten.

Author: Scheduler Development Team
Version: 1.0.0
"""

from .staff_service import StaffService, UnlinkResult

__all__ = ["StaffService", "UnlinkResult"]
