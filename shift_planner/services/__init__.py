"""
Shift Planner Services Package - Restaurant Scheduler

Dieses Paket enthält die Kernlogik der Schichtplanung:
- Assignment Rule Checker (Rollen, Doppelschichten, Standortkonflikte)
- Calendar Projector (Monats- und Wochenraster)
- Shift Window Cache (Cache mit monatsweiser Invalidierung)
- Shift Service (Prüfen, Speichern, Löschen)

Author: Scheduler Development Team
Version: 1.0.0
"""

from .assignment_rules import (
    Conflict,
    Decision,
    DecisionStatus,
    OrmShiftLookup,
    ShiftLookup,
    check_assignment,
)
from .calendar_projector import (
    CalendarCell,
    CalendarGrid,
    ShiftEntry,
    bucket_shifts,
    month_window,
    project_month,
    project_week,
    week_window,
)
from .shift_cache import ShiftWindowCache
from .shift_service import ShiftService

__all__ = [
    "CalendarCell",
    "CalendarGrid",
    "Conflict",
    "Decision",
    "DecisionStatus",
    "OrmShiftLookup",
    "ShiftEntry",
    "ShiftLookup",
    "ShiftService",
    "ShiftWindowCache",
    "bucket_shifts",
    "check_assignment",
    "month_window",
    "project_month",
    "project_week",
    "week_window",
]
