"""
Assignment Rule Checker - Restaurant Scheduler

Prüft eine geplante Schicht, bevor sie gespeichert wird. Die Prüfung ist
rein (keine Schreibzugriffe); bestehende Schichten werden über einen
injizierten ShiftLookup gelesen.

Prüfreihenfolge:
1. Rolle: Mitarbeiter muss die Rolle besitzen            -> RoleMismatch
2. Standortspezifische Rolle wird im Restaurant angeboten -> RoleNotOffered
3. Mitarbeiter arbeitet in diesem Restaurant              -> NotLinked
4. Gleiches Restaurant, gleicher Tag (harte Sperre)       -> DuplicateShift
5. Anderes Restaurant, gleicher Tag (nur Warnung)         -> AcceptedWithWarning

Author: Scheduler Development Team
Version: 1.0.0
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol, Tuple

from core.employees.models import EmployeeRestaurant, Role
from core.exceptions import (
    DuplicateShift,
    NotLinked,
    RoleMismatch,
    RoleNotOffered,
    SchedulingException,
    ValidationFailed,
)
from ..models import Shift


class DecisionStatus(Enum):
    ACCEPTED = "accepted"
    ACCEPTED_WITH_WARNING = "accepted_with_warning"
    REJECTED = "rejected"


@dataclass(frozen=True)
class Conflict:
    """Bestehende Schicht desselben Mitarbeiters in einem anderen Restaurant."""

    shift_id: int
    restaurant_id: int
    restaurant_name: str
    role: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "shift_id": self.shift_id,
            "restaurant_id": self.restaurant_id,
            "restaurant_name": self.restaurant_name,
            "role": self.role,
        }


@dataclass(frozen=True)
class Decision:
    """
    Ergebnis der Prüfung.

    Attributes:
        status: Accepted, Accepted-with-warning oder Rejected
        conflicts: Konflikte in anderen Restaurants (nur bei Warnung)
        error: Grund der Ablehnung (nur bei Rejected)
    """

    status: DecisionStatus
    conflicts: Tuple[Conflict, ...] = field(default_factory=tuple)
    error: Optional[SchedulingException] = None

    @property
    def allowed(self) -> bool:
        return self.status is not DecisionStatus.REJECTED

    @property
    def has_warning(self) -> bool:
        return self.status is DecisionStatus.ACCEPTED_WITH_WARNING

    def conflict_dicts(self) -> List[Dict[str, Any]]:
        return [conflict.to_dict() for conflict in self.conflicts]

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"status": self.status.value}
        if self.conflicts:
            data["conflicts"] = self.conflict_dicts()
        if self.error is not None:
            data["reason"] = self.error.error_code
            data["detail"] = self.error.message
        return data


def accepted() -> Decision:
    return Decision(DecisionStatus.ACCEPTED)


def accepted_with_warning(conflicts: List[Conflict]) -> Decision:
    return Decision(DecisionStatus.ACCEPTED_WITH_WARNING, conflicts=tuple(conflicts))


def rejected(error: SchedulingException) -> Decision:
    return Decision(DecisionStatus.REJECTED, error=error)


class ShiftLookup(Protocol):
    """Lesezugriff auf bestehende Schichten und Zuordnungen."""

    def is_linked(self, employee_id: int, restaurant_id: int) -> bool:
        ...

    def find_duplicate(
        self, employee_id: int, restaurant_id: int, day: date
    ) -> Optional[int]:
        ...

    def find_other_locations(
        self, employee_id: int, day: date, exclude_restaurant_id: int
    ) -> List[Conflict]:
        ...


class OrmShiftLookup:
    """ShiftLookup auf Basis des Django ORM."""

    def is_linked(self, employee_id: int, restaurant_id: int) -> bool:
        return EmployeeRestaurant.objects.filter(
            employee_id=employee_id, restaurant_id=restaurant_id
        ).exists()

    def find_duplicate(
        self, employee_id: int, restaurant_id: int, day: date
    ) -> Optional[int]:
        return (
            Shift.objects.filter(
                employee_id=employee_id, restaurant_id=restaurant_id, date=day
            )
            .values_list("pk", flat=True)
            .first()
        )

    def find_other_locations(
        self, employee_id: int, day: date, exclude_restaurant_id: int
    ) -> List[Conflict]:
        shifts = (
            Shift.objects.filter(employee_id=employee_id, date=day)
            .exclude(restaurant_id=exclude_restaurant_id)
            .select_related("restaurant")
            .order_by("restaurant__name", "pk")
        )
        return [
            Conflict(
                shift_id=shift.pk,
                restaurant_id=shift.restaurant_id,
                restaurant_name=shift.restaurant.name,
                role=shift.role,
            )
            for shift in shifts
        ]


def check_assignment(employee, restaurant, day: date, role: str, lookup: ShiftLookup) -> Decision:
    """
    Prüft, ob ``employee`` am ``day`` mit ``role`` in ``restaurant`` arbeiten darf.

    Args:
        employee: Mitarbeiter (benötigt pk, name, roles)
        restaurant: Restaurant (benötigt pk, name, offers_role())
        day: Kalendertag der Schicht
        role: Angefragte Rolle
        lookup: Lesezugriff auf bestehende Schichten

    Returns:
        Decision (accepted, accepted_with_warning oder rejected)
    """
    if role not in Role.values:
        return rejected(
            ValidationFailed(
                f"Unknown role '{role}'.", field_errors={"role": [f"'{role}' is not a valid role."]}
            )
        )

    if role not in (employee.roles or []):
        return rejected(RoleMismatch(employee.name, role))

    if not restaurant.offers_role(role):
        return rejected(RoleNotOffered(restaurant.name, role))

    if not lookup.is_linked(employee.pk, restaurant.pk):
        return rejected(NotLinked(employee.name, restaurant.name))

    existing = lookup.find_duplicate(employee.pk, restaurant.pk, day)
    if existing is not None:
        return rejected(DuplicateShift(existing_shift_id=existing))

    conflicts = lookup.find_other_locations(employee.pk, day, restaurant.pk)
    if conflicts:
        return accepted_with_warning(conflicts)

    return accepted()
