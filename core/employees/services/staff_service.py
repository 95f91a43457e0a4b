"""
Staff Service - Restaurant Scheduler

Service für die Mitarbeiter-Verwaltung:
- Anlegen von Mitarbeitern (optional direkt mit Restaurant-Zuordnung)
- Zuordnen und Entfernen von Restaurants ("arbeitet bei")
- Anlegen von Login-Konten für Mitarbeiter

Regeln für das Entfernen einer Zuordnung:
- Letzte Zuordnung entfernt -> Mitarbeiter wird gelöscht
- Sonst wird nur die Zuordnung entfernt; war sie der Hauptstandort, wird die
  älteste verbleibende Zuordnung zum Hauptstandort

Author: Scheduler Development Team
Version: 1.0.0
"""

import logging
import secrets
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import DatabaseError, IntegrityError, transaction

from core.exceptions import AlreadyLinked, BackendUnavailable, NotLinked, ValidationFailed
from ..models import Employee, EmployeeRestaurant, Restaurant

logger = logging.getLogger(__name__)

User = get_user_model()

PASSWORD_CHARSET = (
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789!@#$%^&*"
)


@dataclass(frozen=True)
class UnlinkResult:
    """
    Ergebnis von StaffService.unlink.

    Attributes:
        employee_deleted: True, wenn die letzte Zuordnung entfernt wurde
        promoted_restaurant_id: Neuer Hauptstandort, falls gewechselt
    """

    employee_deleted: bool
    promoted_restaurant_id: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "employee_deleted": self.employee_deleted,
            "promoted_restaurant_id": self.promoted_restaurant_id,
        }


class StaffService:
    """
    Service für Mitarbeiter- und Standortoperationen.

    Jede schreibende Operation läuft in einer eigenen Transaktion; bei
    Datenbankfehlern wird nichts geändert und BackendUnavailable geworfen.
    """

    def __init__(self):
        self.logger = logger

    def create_employee(
        self, data: Dict[str, Any], restaurant: Optional[Restaurant] = None
    ) -> Employee:
        """
        Legt einen Mitarbeiter an und ordnet ihn optional einem Restaurant zu.

        Args:
            data: Validierte Felder (name, email, phone, roles)
            restaurant: Restaurant, dem der Mitarbeiter zugeordnet wird

        Returns:
            Der neue Mitarbeiter
        """
        try:
            with transaction.atomic():
                employee = Employee.objects.create(**data)
                if restaurant is not None:
                    EmployeeRestaurant.objects.create(
                        employee=employee, restaurant=restaurant, is_primary=True
                    )
        except IntegrityError as e:
            raise ValidationFailed(
                "An employee with this email address already exists.",
                field_errors={"email": [str(e)]},
            )
        except DatabaseError as e:
            self.logger.error(f"Fehler beim Anlegen des Mitarbeiters: {e}", exc_info=True)
            raise BackendUnavailable()

        self.logger.info(
            f"Mitarbeiter angelegt: {employee.name} (ID: {employee.pk})"
            + (f" bei {restaurant.name}" if restaurant is not None else "")
        )
        return employee

    def link(
        self, employee: Employee, restaurant: Restaurant, is_primary: bool = False
    ) -> EmployeeRestaurant:
        """
        Ordnet einen Mitarbeiter einem Restaurant zu.

        Die erste Zuordnung eines Mitarbeiters ist immer der Hauptstandort.

        Raises:
            AlreadyLinked: Zuordnung existiert bereits
        """
        if EmployeeRestaurant.objects.filter(
            employee=employee, restaurant=restaurant
        ).exists():
            raise AlreadyLinked(employee.name, restaurant.name)

        try:
            with transaction.atomic():
                links = EmployeeRestaurant.objects.select_for_update().filter(
                    employee=employee
                )
                first_link = not links.exists()
                make_primary = first_link or is_primary
                if make_primary and not first_link:
                    links.filter(is_primary=True).update(is_primary=False)
                link = EmployeeRestaurant.objects.create(
                    employee=employee, restaurant=restaurant, is_primary=make_primary
                )
        except IntegrityError:
            # Gleichzeitige Zuordnung durch einen anderen Request
            raise AlreadyLinked(employee.name, restaurant.name)
        except DatabaseError as e:
            self.logger.error(f"Fehler beim Zuordnen: {e}", exc_info=True)
            raise BackendUnavailable()

        self.logger.info(f"{employee.name} arbeitet jetzt bei {restaurant.name}")
        return link

    def unlink(self, employee: Employee, restaurant: Restaurant) -> UnlinkResult:
        """
        Entfernt die Zuordnung eines Mitarbeiters zu einem Restaurant.

        Ist es die letzte Zuordnung, wird der Mitarbeiter selbst gelöscht
        (inklusive seiner Schichten). Sonst bleiben Mitarbeiter, Schichten
        und übrige Zuordnungen erhalten.

        Raises:
            NotLinked: Mitarbeiter arbeitet nicht bei diesem Restaurant
        """
        try:
            with transaction.atomic():
                links = list(
                    EmployeeRestaurant.objects.select_for_update()
                    .filter(employee=employee)
                    .order_by("created_at", "id")
                )
                target = next(
                    (link for link in links if link.restaurant_id == restaurant.pk),
                    None,
                )
                if target is None:
                    raise NotLinked(employee.name, restaurant.name)

                if len(links) == 1:
                    employee_id = employee.pk
                    employee.delete()
                    result = UnlinkResult(employee_deleted=True)
                    self.logger.info(
                        f"Letzte Zuordnung entfernt, Mitarbeiter {employee_id} gelöscht"
                    )
                    return result

                target.delete()
                promoted = None
                if target.is_primary:
                    successor = next(link for link in links if link.pk != target.pk)
                    successor.is_primary = True
                    successor.save(update_fields=["is_primary"])
                    promoted = successor.restaurant_id
        except DatabaseError as e:
            self.logger.error(f"Fehler beim Entfernen der Zuordnung: {e}", exc_info=True)
            raise BackendUnavailable()

        self.logger.info(f"{employee.name} arbeitet nicht mehr bei {restaurant.name}")
        return UnlinkResult(employee_deleted=False, promoted_restaurant_id=promoted)

    @staticmethod
    def generate_password(length: Optional[int] = None) -> str:
        length = length or getattr(settings, "SCHEDULER_ACCOUNT_PASSWORD_LENGTH", 12)
        return "".join(secrets.choice(PASSWORD_CHARSET) for _ in range(length))

    def create_account(
        self, employee: Employee, password: Optional[str] = None
    ) -> Tuple[Any, str]:
        """
        Legt ein Login-Konto für einen Mitarbeiter ohne Konto an.

        Der Benutzername ist die E-Mail-Adresse des Mitarbeiters. Ohne
        Passwort wird ein zufälliges Passwort erzeugt.

        Returns:
            Tuple (user, klartext-passwort)
        """
        if employee.has_account:
            raise ValidationFailed(f"{employee.name} already has an account.")
        if not employee.email:
            raise ValidationFailed(
                f"{employee.name} needs an email address before an account can be created.",
                field_errors={"email": ["This field is required."]},
            )
        if User.objects.filter(username=employee.email).exists():
            raise ValidationFailed(
                "A user with this email address already exists.",
                field_errors={"email": ["Already in use."]},
            )

        password = password or self.generate_password()
        try:
            with transaction.atomic():
                user = User.objects.create_user(
                    username=employee.email,
                    email=employee.email,
                    password=password,
                )
                employee.user = user
                employee.save(update_fields=["user", "updated_at"])
        except DatabaseError as e:
            self.logger.error(f"Fehler beim Anlegen des Kontos: {e}", exc_info=True)
            raise BackendUnavailable()

        self.logger.info(f"Login-Konto für {employee.name} angelegt (User ID: {user.pk})")
        return user, password
