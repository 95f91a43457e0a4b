from rest_framework.permissions import BasePermission, SAFE_METHODS
from core.employees.identity import identity_for_request
from core.employees.models import EmployeeRestaurant


class IsSchedulerAdmin(BasePermission):
    """Erlaubt Zugriff nur für Admins (is_staff oder Superuser)."""

    message = "Only administrators may perform this action."

    def has_permission(self, request, view):
        return identity_for_request(request).is_admin


class IsAdminOrStaffReadOnly(BasePermission):
    """
    Admins dürfen alles, verknüpfte Mitarbeiter nur lesen.

    Die Einschränkung auf die eigenen Restaurants erfolgt im View bzw. in
    has_object_permission.
    """

    def has_permission(self, request, view):
        identity = identity_for_request(request)
        if identity.is_admin:
            return True
        return identity.is_employee and request.method in SAFE_METHODS

    def has_object_permission(self, request, view, obj):
        identity = identity_for_request(request)
        if identity.is_admin:
            return True
        restaurant_id = getattr(obj, "restaurant_id", None) or obj.pk
        return works_at(identity.employee_id, restaurant_id)


class IsLinkedEmployee(BasePermission):
    """Nur Mitarbeiter mit verknüpftem Login-Konto."""

    def has_permission(self, request, view):
        return identity_for_request(request).is_employee


def works_at(employee_id, restaurant_id) -> bool:
    if not employee_id or not restaurant_id:
        return False
    return EmployeeRestaurant.objects.filter(
        employee_id=employee_id, restaurant_id=restaurant_id
    ).exists()
