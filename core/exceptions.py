"""
Scheduling Exceptions - Restaurant Scheduler

This module provides the exception classes raised by the scheduling
services. They follow a hierarchical structure so callers can handle a whole
family (``SchedulingException``) or a single case (``DuplicateShift``).

Every exception carries an HTTP status code and a stable error code; the
``scheduling_exception_handler`` registered in the REST framework settings
turns them into API responses.

Author: Scheduler Development Team
Version: 1.0.0
"""

import logging
from typing import Optional, Dict, Any, List

from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class SchedulingException(Exception):
    """
    Base exception class for all scheduling related errors.

    Attributes:
        message (str): Human-readable error message
        status_code (int): HTTP status code used for the API response
        error_code (str): Stable, machine-readable error identifier
        details (Dict[str, Any]): Additional error details
    """

    default_status_code = 400
    default_error_code = "scheduling_error"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code or self.default_status_code
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary for serialization.

        Returns:
            Dictionary representation of the exception
        """
        return {
            "detail": self.message,
            "code": self.error_code,
            **self.details,
        }


class ValidationFailed(SchedulingException):
    """A required field is missing or malformed."""

    default_error_code = "validation_error"

    def __init__(
        self, message: str, field_errors: Optional[Dict[str, Any]] = None
    ) -> None:
        details = {}
        if field_errors:
            details["errors"] = field_errors
        super().__init__(message, details=details)


class RoleMismatch(SchedulingException):
    """
    Raised when the employee is not qualified for the requested role.

    Attributes:
        role (str): The role the employee is missing
    """

    default_error_code = "role_mismatch"

    def __init__(self, employee_name: str, role: str) -> None:
        self.role = role
        super().__init__(
            f"{employee_name} is not qualified for the role '{role}'.",
            details={"missing_role": role},
        )


class RoleNotOffered(SchedulingException):
    """Raised when a restaurant-specific role is requested elsewhere."""

    default_error_code = "role_not_offered"

    def __init__(self, restaurant_name: str, role: str) -> None:
        self.role = role
        super().__init__(
            f"The role '{role}' is not offered at {restaurant_name}.",
            details={"role": role},
        )


class NotLinked(SchedulingException):
    """Raised when the employee does not work at the restaurant."""

    default_error_code = "not_linked"

    def __init__(self, employee_name: str, restaurant_name: str) -> None:
        super().__init__(f"{employee_name} does not work at {restaurant_name}.")


class DuplicateShift(SchedulingException):
    """
    Raised when the employee already has a shift at the same restaurant on
    the same date. This is a hard block.
    """

    default_status_code = 409
    default_error_code = "duplicate_shift"

    def __init__(
        self,
        message: str = "This employee already has a shift at this restaurant on this date.",
        existing_shift_id: Optional[int] = None,
    ) -> None:
        details = {}
        if existing_shift_id:
            details["existing_shift_id"] = existing_shift_id
        super().__init__(message, details=details)


class CrossLocationConflict(SchedulingException):
    """
    Raised when a cross-location conflict was not confirmed by the caller.

    The conflict itself is only a warning; the caller may resubmit with
    ``confirm=True`` to create the shift anyway.

    Attributes:
        conflicts (List[Dict[str, Any]]): Conflicting restaurant/role pairs
    """

    default_status_code = 409
    default_error_code = "cross_location_conflict"

    def __init__(self, conflicts: List[Dict[str, Any]]) -> None:
        self.conflicts = conflicts
        names = ", ".join(f"{c['restaurant_name']}/{c['role']}" for c in conflicts)
        super().__init__(
            f"Employee is already scheduled on this date at: {names}. "
            "Confirm to schedule anyway.",
            details={"conflicts": conflicts, "requires_confirmation": True},
        )


class AlreadyLinked(SchedulingException):
    """Raised when an employee is linked to a restaurant twice."""

    default_status_code = 409
    default_error_code = "already_linked"

    def __init__(self, employee_name: str, restaurant_name: str) -> None:
        super().__init__(f"{employee_name} already works at {restaurant_name}.")


class BackendUnavailable(SchedulingException):
    """
    Raised when the database rejects or fails a write. The operation is
    aborted and no state is changed.
    """

    default_status_code = 503
    default_error_code = "backend_unavailable"

    def __init__(self, message: str = "The scheduling backend is unavailable.") -> None:
        super().__init__(message)


def scheduling_exception_handler(exc, context):
    """
    REST framework exception handler that renders SchedulingExceptions.

    All other exceptions are delegated to the default handler.
    """
    if isinstance(exc, SchedulingException):
        view = context.get("view")
        logger.info(
            f"{exc.__class__.__name__} in {view.__class__.__name__ if view else 'unknown view'}: {exc.message}"
        )
        return Response(exc.to_dict(), status=exc.status_code)
    return exception_handler(exc, context)
