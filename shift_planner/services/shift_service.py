"""
Shift Service - Restaurant Scheduler

Validieren-dann-Speichern für Schichten:
- check(): reine Prüfung über den Assignment Rule Checker
- create_shift(): Prüfung, Bestätigung von Konflikten, Speichern
- delete_shift(): Löschen
- list_shifts()/window_entries(): Schichten eines Restaurants im Bereich

Der Schicht-Cache wird über Signale (siehe shift_planner.signals) bei jedem
Anlegen und Löschen invalidiert, auch bei kaskadierenden Löschungen.

Author: Scheduler Development Team
Version: 1.0.0
"""

import logging
from datetime import date, time
from typing import List, Optional, Tuple

from django.db import DatabaseError, IntegrityError, transaction

from core.employees.models import Employee, Restaurant
from core.exceptions import BackendUnavailable, CrossLocationConflict, DuplicateShift
from ..models import Shift
from .assignment_rules import Decision, OrmShiftLookup, ShiftLookup, check_assignment
from .calendar_projector import ShiftEntry
from .shift_cache import ShiftWindowCache

logger = logging.getLogger(__name__)


class ShiftService:
    """
    Service für Schichtoperationen.

    Args:
        lookup: Lesezugriff für die Regelprüfung (Standard: ORM)
        cache: Cache für Schichtbereiche (Standard: Django Cache)
    """

    def __init__(
        self,
        lookup: Optional[ShiftLookup] = None,
        cache: Optional[ShiftWindowCache] = None,
    ):
        self.lookup = lookup or OrmShiftLookup()
        self.cache = cache or ShiftWindowCache()
        self.logger = logger

    def check(self, employee: Employee, restaurant: Restaurant, day: date, role: str) -> Decision:
        return check_assignment(employee, restaurant, day, role, self.lookup)

    def create_shift(
        self,
        *,
        employee: Employee,
        restaurant: Restaurant,
        day: date,
        role: str,
        start_time: Optional[time] = None,
        end_time: Optional[time] = None,
        notes: str = "",
        confirm: bool = False,
    ) -> Tuple[Shift, Decision]:
        """
        Prüft und speichert eine Schicht.

        Args:
            confirm: Bestätigt Konflikte in anderen Restaurants

        Returns:
            Tuple (neue Schicht, Entscheidung inkl. Warnungen)

        Raises:
            RoleMismatch, RoleNotOffered, NotLinked, DuplicateShift,
            ValidationFailed: Schicht wurde abgelehnt
            CrossLocationConflict: Konflikt wurde nicht bestätigt
            BackendUnavailable: Datenbankfehler beim Speichern
        """
        decision = self.check(employee, restaurant, day, role)

        if not decision.allowed:
            self.logger.info(
                f"Schicht abgelehnt ({decision.error.error_code}): "
                f"{employee.name} @ {restaurant.name} {day} {role}"
            )
            raise decision.error

        if decision.has_warning and not confirm:
            raise CrossLocationConflict(decision.conflict_dicts())

        try:
            with transaction.atomic():
                shift = Shift.objects.create(
                    employee=employee,
                    restaurant=restaurant,
                    date=day,
                    role=role,
                    start_time=start_time,
                    end_time=end_time,
                    notes=notes or "",
                )
        except IntegrityError:
            # Unique-Constraint greift bei gleichzeitigen Anfragen
            self.logger.info(
                f"Doppelte Schicht durch Constraint verhindert: {employee.name} @ {restaurant.name} {day}"
            )
            raise DuplicateShift()
        except DatabaseError as e:
            self.logger.error(f"Fehler beim Speichern der Schicht: {e}", exc_info=True)
            raise BackendUnavailable()

        self.logger.info(
            f"Schicht angelegt (ID: {shift.pk}): {employee.name} @ {restaurant.name} {day} {role}"
            + (" trotz Konflikt" if decision.has_warning else "")
        )
        return shift, decision

    def delete_shift(self, shift: Shift) -> None:
        shift_id = shift.pk
        try:
            shift.delete()
        except DatabaseError as e:
            self.logger.error(f"Fehler beim Löschen der Schicht {shift_id}: {e}", exc_info=True)
            raise BackendUnavailable()
        self.logger.info(f"Schicht gelöscht (ID: {shift_id})")

    def list_shifts(self, restaurant_id: int, start: date, end: date):
        """Schichten eines Restaurants im Bereich [start, end] (inklusive)."""
        return (
            Shift.objects.filter(
                restaurant_id=restaurant_id, date__gte=start, date__lte=end
            )
            .select_related("employee")
            .order_by("date", "role", "start_time", "pk")
        )

    def window_entries(self, restaurant_id: int, start: date, end: date) -> List[ShiftEntry]:
        """
        Schichten des sichtbaren Kalenderbereichs, gecacht.

        Fehler beim Laden führen zu einer leeren Liste (fail-soft, kein Retry).
        """
        try:
            return self.cache.get_or_load(
                restaurant_id,
                start,
                end,
                lambda: [
                    ShiftEntry.from_shift(shift)
                    for shift in self.list_shifts(restaurant_id, start, end)
                ],
            )
        except DatabaseError as e:
            self.logger.error(
                f"Fehler beim Laden der Schichten für Restaurant {restaurant_id} "
                f"({start} bis {end}): {e}",
                exc_info=True,
            )
            return []

    def invalidate(self, restaurant_id: int, day: date) -> None:
        self.cache.invalidate(restaurant_id, day)
