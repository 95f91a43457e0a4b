"""
Identity Resolution - Restaurant Scheduler

Maps an authenticated Django user onto one of the three identities the
scheduling core understands:

- Admin: staff or superuser accounts
- Employee(employee_id): accounts linked to an Employee record
- Unauthenticated: everything else (anonymous or unlinked accounts)

Author: Scheduler Development Team
Version: 1.0.0
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .models import Employee


class IdentityKind(Enum):
    ADMIN = "admin"
    EMPLOYEE = "employee"
    UNAUTHENTICATED = "unauthenticated"


@dataclass(frozen=True)
class Identity:
    """
    Resolved caller identity.

    Attributes:
        kind: Which of the three identities applies
        employee_id: Employee primary key, only set for EMPLOYEE
    """

    kind: IdentityKind
    employee_id: Optional[int] = None

    @property
    def is_admin(self) -> bool:
        return self.kind is IdentityKind.ADMIN

    @property
    def is_employee(self) -> bool:
        return self.kind is IdentityKind.EMPLOYEE

    @property
    def is_authenticated(self) -> bool:
        return self.kind is not IdentityKind.UNAUTHENTICATED

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "employee_id": self.employee_id}


UNAUTHENTICATED = Identity(IdentityKind.UNAUTHENTICATED)


def resolve_identity(user) -> Identity:
    """Returns the Identity for ``user`` (may be None or AnonymousUser)."""

    if user is None or not user.is_authenticated:
        return UNAUTHENTICATED

    if user.is_staff or user.is_superuser:
        return Identity(IdentityKind.ADMIN)

    # Preferred: direkte Relation user.employee_profile
    try:
        employee = user.employee_profile
    except Employee.DoesNotExist:
        return UNAUTHENTICATED
    except AttributeError:
        # TokenUser und andere Nicht-Model-User haben keine Relation
        return UNAUTHENTICATED
    return Identity(IdentityKind.EMPLOYEE, employee_id=employee.pk)


def identity_for_request(request) -> Identity:
    """Resolves once per request and caches the result on the request object."""
    identity = getattr(request, "_scheduler_identity", None)
    if identity is None:
        identity = resolve_identity(getattr(request, "user", None))
        request._scheduler_identity = identity
    return identity
