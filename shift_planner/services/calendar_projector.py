"""
Calendar Projector - Restaurant Scheduler

Berechnet die sichtbaren Kalenderzellen für die Monats- und Wochenansicht
und verteilt Schichten auf diese Zellen.

- Monatsansicht: vom Sonntag vor (oder am) Monatsersten bis zum Samstag
  nach (oder am) Monatsletzten, also immer ganze Wochen
- Wochenansicht: Sonntag vor (oder am) Referenzdatum plus sechs Tage
- Zellen außerhalb des Monats sind "nicht primär" (abgedunkelt), erhalten
  aber trotzdem ihre Schichten
- "Heute" wird einmal pro Projektion bestimmt und per ISO-String verglichen

Alle Funktionen sind rein: sie lesen weder Uhr noch Datenbank.

Author: Scheduler Development Team
Version: 1.0.0
"""

import calendar
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date, time, timedelta
from typing import Any, Dict, Iterable, List, Optional, Tuple

MONTH = "month"
WEEK = "week"

DAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


@dataclass(frozen=True)
class ShiftEntry:
    """
    Schicht, wie sie im Kalender angezeigt und gecacht wird.

    Entkoppelt die Projektion vom ORM, damit Einträge gepickelt und ohne
    Datenbankzugriff gerendert werden können.
    """

    id: int
    date: date
    role: str
    employee_id: int
    employee_name: str
    restaurant_id: int
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    notes: str = ""

    @classmethod
    def from_shift(cls, shift) -> "ShiftEntry":
        return cls(
            id=shift.pk,
            date=shift.date,
            role=shift.role,
            employee_id=shift.employee_id,
            employee_name=shift.employee.name,
            restaurant_id=shift.restaurant_id,
            start_time=shift.start_time,
            end_time=shift.end_time,
            notes=shift.notes,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "role": self.role,
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "restaurant_id": self.restaurant_id,
            "start_time": self.start_time.strftime("%H:%M") if self.start_time else None,
            "end_time": self.end_time.strftime("%H:%M") if self.end_time else None,
            "notes": self.notes,
        }


@dataclass
class CalendarCell:
    date: date
    is_primary: bool
    is_today: bool
    shifts_by_role: Dict[str, List[ShiftEntry]] = field(default_factory=dict)

    @property
    def iso(self) -> str:
        return self.date.isoformat()

    @property
    def shift_count(self) -> int:
        return sum(len(entries) for entries in self.shifts_by_role.values())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.iso,
            "day": self.date.day,
            "is_primary": self.is_primary,
            "is_today": self.is_today,
            "shifts_by_role": {
                role: [entry.to_dict() for entry in entries]
                for role, entries in self.shifts_by_role.items()
            },
        }


@dataclass
class CalendarGrid:
    """
    Ergebnis einer Projektion.

    Attributes:
        mode: "month" oder "week"
        start: Erster sichtbarer Tag (immer ein Sonntag)
        end: Letzter sichtbarer Tag (immer ein Samstag)
        cells: Zellen in Kalenderreihenfolge
        year/month: Zielmonat (nur Monatsansicht)
    """

    mode: str
    start: date
    end: date
    cells: List[CalendarCell]
    year: Optional[int] = None
    month: Optional[int] = None

    @property
    def weeks(self) -> List[List[CalendarCell]]:
        return [self.cells[i:i + 7] for i in range(0, len(self.cells), 7)]

    @property
    def today_cell(self) -> Optional[CalendarCell]:
        return next((cell for cell in self.cells if cell.is_today), None)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "mode": self.mode,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "day_names": DAY_NAMES,
            "weeks": [[cell.to_dict() for cell in week] for week in self.weeks],
        }
        if self.mode == MONTH:
            data["year"] = self.year
            data["month"] = self.month
        return data


def days_since_sunday(day: date) -> int:
    # date.weekday(): Montag = 0 ... Sonntag = 6
    return (day.weekday() + 1) % 7


def week_start(day: date) -> date:
    """Sonntag am oder vor ``day``."""
    return day - timedelta(days=days_since_sunday(day))


def month_window(year: int, month: int) -> Tuple[date, date]:
    """
    Sichtbarer Bereich der Monatsansicht (inklusive Grenzen).

    Returns:
        (Sonntag am/vor dem Ersten, Samstag am/nach dem Letzten)
    """
    first = date(year, month, 1)
    last = date(year, month, calendar.monthrange(year, month)[1])
    start = week_start(first)
    end = last + timedelta(days=6 - days_since_sunday(last))
    return start, end


def week_window(reference: date) -> Tuple[date, date]:
    start = week_start(reference)
    return start, start + timedelta(days=6)


def shift_month(year: int, month: int, offset: int) -> Tuple[int, int]:
    """Navigation: ``offset`` Monate vor (positiv) oder zurück (negativ)."""
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def bucket_shifts(shifts: Iterable[ShiftEntry]) -> Dict[str, Dict[str, List[ShiftEntry]]]:
    """
    Gruppiert Schichten nach ISO-Datum und innerhalb eines Tages nach Rolle.

    Innerhalb einer Rolle bleibt die Eingabereihenfolge erhalten.
    """
    buckets: Dict[str, Dict[str, List[ShiftEntry]]] = defaultdict(lambda: defaultdict(list))
    for entry in shifts:
        buckets[entry.date.isoformat()][entry.role].append(entry)
    return {iso: dict(by_role) for iso, by_role in buckets.items()}


def _project(
    start: date,
    end: date,
    shifts: Iterable[ShiftEntry],
    today: date,
    is_primary,
) -> List[CalendarCell]:
    buckets = bucket_shifts(shifts)
    today_iso = today.isoformat()
    cells = []
    current = start
    while current <= end:
        iso = current.isoformat()
        cells.append(
            CalendarCell(
                date=current,
                is_primary=is_primary(current),
                is_today=iso == today_iso,
                shifts_by_role=buckets.get(iso, {}),
            )
        )
        current += timedelta(days=1)
    return cells


def project_month(
    year: int, month: int, shifts: Iterable[ShiftEntry], today: date
) -> CalendarGrid:
    """
    Monatsansicht für ``year``/``month``.

    Args:
        shifts: Schichten des sichtbaren Bereichs (siehe month_window)
        today: Heutiges Datum, einmal pro Anfrage bestimmt
    """
    start, end = month_window(year, month)
    cells = _project(
        start, end, shifts, today, lambda day: day.month == month and day.year == year
    )
    return CalendarGrid(MONTH, start, end, cells, year=year, month=month)


def project_week(reference: date, shifts: Iterable[ShiftEntry], today: date) -> CalendarGrid:
    """Wochenansicht (Sonntag bis Samstag) um ``reference``."""
    start, end = week_window(reference)
    cells = _project(start, end, shifts, today, lambda day: True)
    return CalendarGrid(WEEK, start, end, cells)
