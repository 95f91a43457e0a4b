"""
Restaurant Views

Restaurants werden von Admins angelegt und danach nicht mehr geändert oder
gelöscht. Mitarbeiter sehen nur die Restaurants, denen sie zugeordnet sind.

Author: Scheduler Development Team
Version: 1.0.0
"""

import logging

from django.db.models import Q
from rest_framework import mixins, viewsets

from ..identity import identity_for_request
from ..models import Restaurant
from ..permissions import IsAdminOrStaffReadOnly
from ..serializers import RestaurantSerializer

logger = logging.getLogger(__name__)


class RestaurantViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    viewsets.GenericViewSet,
):
    """
    ViewSet für Restaurants (auflisten, abrufen, anlegen)
    """

    serializer_class = RestaurantSerializer
    permission_classes = [IsAdminOrStaffReadOnly]

    def get_queryset(self):
        """
        Admins sehen alle Restaurants, Mitarbeiter nur ihre eigenen.
        Sortierung nach Name.
        """
        queryset = Restaurant.objects.all()
        identity = identity_for_request(self.request)
        if not identity.is_admin:
            queryset = queryset.filter(employee_links__employee_id=identity.employee_id)

        search = self.request.query_params.get("search", None)
        if search:
            queryset = queryset.filter(
                Q(name__icontains=search) | Q(address__icontains=search)
            )
        return queryset.order_by("name").distinct()

    def perform_create(self, serializer):
        restaurant = serializer.save()
        logger.info(f"Restaurant angelegt: {restaurant.name} (ID: {restaurant.pk})")
