"""
Role Views

Liefert die Rollen-Enumeration mit Version, damit Clients eine gecachte
Rollenliste erneuern können.

Author: Scheduler Development Team
Version: 1.0.0
"""

from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from ..models import ROLE_SET_VERSION, Role


class RoleListView(APIView):
    """
    GET /api/staff/roles/

    Response:
        {"version": 1, "roles": [{"value": "door", "label": "Door", "restaurant_specific": false}, ...]}
    """

    permission_classes = [IsAuthenticated]

    def get(self, request):
        restaurant_specific = Role.restaurant_specific()
        return Response(
            {
                "version": ROLE_SET_VERSION,
                "roles": [
                    {
                        "value": role.value,
                        "label": role.label,
                        "restaurant_specific": role in restaurant_specific,
                    }
                    for role in Role
                ],
            }
        )
