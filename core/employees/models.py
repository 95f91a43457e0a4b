from django.db import models
from django.conf import settings


# Version of the role enumeration below. Bump whenever a role is added or
# removed so clients caching the role list can detect the change.
ROLE_SET_VERSION = 1


class Role(models.TextChoices):
    """
    Stationen, für die ein Mitarbeiter qualifiziert ist bzw. eingeteilt wird.
    """

    DOOR = "door", "Door"
    GELATO = "gelato", "Gelato"
    SERVER = "server", "Server"
    GENERAL = "general", "General"

    @classmethod
    def restaurant_specific(cls):
        """Roles that are only offered at restaurants which enable them."""
        return frozenset({cls.GELATO})


class Restaurant(models.Model):
    """
    Model für Restaurants (Standorte)
    """

    name = models.CharField(max_length=120, unique=True, verbose_name="Name")
    address = models.CharField(max_length=255, blank=True, verbose_name="Adresse")
    phone = models.CharField(max_length=40, blank=True, verbose_name="Telefon")
    special_roles = models.JSONField(
        default=list,
        blank=True,
        verbose_name="Standortspezifische Rollen",
        help_text="Restaurant-specific roles offered here (e.g. ['gelato'])",
    )
    created_at = models.DateTimeField(auto_now_add=True, verbose_name="Erstellt am")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="Aktualisiert am")

    class Meta:
        verbose_name = "Restaurant"
        verbose_name_plural = "Restaurants"
        ordering = ["name"]

    def __str__(self):
        return self.name

    def offers_role(self, role: str) -> bool:
        if role not in Role.restaurant_specific():
            return True
        return role in (self.special_roles or [])


class Employee(models.Model):
    """
    Model für Mitarbeiterdaten
    """

    name = models.CharField(max_length=120, verbose_name="Name")
    email = models.EmailField(
        unique=True,
        null=True,
        blank=True,
        verbose_name="E-Mail-Adresse",
        help_text="Used as the login name when an account is created",
    )
    phone = models.CharField(max_length=40, blank=True, verbose_name="Telefon")
    roles = models.JSONField(
        default=list,
        verbose_name="Rollen",
        help_text="Subset of door, gelato, server, general",
    )
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="employee_profile",
        verbose_name="Login-Konto",
    )
    restaurants = models.ManyToManyField(
        Restaurant,
        through="EmployeeRestaurant",
        related_name="employees",
        blank=True,
    )
    created_at = models.DateTimeField(auto_now_add=True, verbose_name="Erstellt am")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="Aktualisiert am")

    class Meta:
        verbose_name = "Mitarbeiter"
        verbose_name_plural = "Mitarbeiter"
        ordering = ["name"]
        indexes = [
            models.Index(fields=["name"], name="employee_name_idx"),
        ]

    def __str__(self):
        return self.name

    def has_role(self, role: str) -> bool:
        return role in (self.roles or [])

    @property
    def has_account(self):
        return self.user_id is not None


class EmployeeRestaurant(models.Model):
    """Zuordnung "arbeitet bei" zwischen Mitarbeiter und Restaurant."""

    employee = models.ForeignKey(
        Employee, on_delete=models.CASCADE, related_name="restaurant_links"
    )
    restaurant = models.ForeignKey(
        Restaurant, on_delete=models.CASCADE, related_name="employee_links"
    )
    is_primary = models.BooleanField(default=False, verbose_name="Hauptstandort")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = ("employee", "restaurant")
        verbose_name = "Standort-Zuordnung"
        verbose_name_plural = "Standort-Zuordnungen"
        ordering = ["created_at", "id"]

    def __str__(self):
        marker = " (primary)" if self.is_primary else ""
        return f"{self.employee.name} → {self.restaurant.name}{marker}"
