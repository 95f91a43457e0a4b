from rest_framework.permissions import BasePermission, SAFE_METHODS
from core.employees.identity import identity_for_request
from core.employees.permissions import works_at

# ------------------------------------------------------------
# Helper: Restaurant-ID einer Anfrage aus Query-Parametern
# (GET) bzw. Body (POST) lesen.
# ------------------------------------------------------------


def requested_restaurant_id(request):
    """Returns die angefragte Restaurant-ID oder None, wenn keine gültige angegeben ist."""

    raw = request.query_params.get("restaurant")
    if raw is None and request.method not in SAFE_METHODS:
        raw = request.data.get("restaurant")
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


class IsAdminOrLinkedReadOnly(BasePermission):
    """
    Admins dürfen alles. Mitarbeiter dürfen Schichten und Kalender nur lesen,
    und nur für Restaurants, denen sie zugeordnet sind.
    """

    message = "You do not have access to this restaurant's schedule."

    def has_permission(self, request, view):
        identity = identity_for_request(request)
        if identity.is_admin:
            return True
        if not identity.is_employee or request.method not in SAFE_METHODS:
            return False

        restaurant_id = requested_restaurant_id(request)
        if restaurant_id is None:
            # Fehlender Parameter wird von der View als 400 gemeldet
            return True
        return works_at(identity.employee_id, restaurant_id)

    def has_object_permission(self, request, view, obj):
        identity = identity_for_request(request)
        if identity.is_admin:
            return True
        return request.method in SAFE_METHODS and works_at(
            identity.employee_id, obj.restaurant_id
        )
