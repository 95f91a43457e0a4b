"""
Employee Views

ViewSet für die Mitarbeiterverwaltung (nur Admins).

API Endpoints:
- GET    /api/staff/employees/                          - Liste (optional ?restaurant=<id>)
- POST   /api/staff/employees/                          - Mitarbeiter anlegen
- GET    /api/staff/employees/{id}/                     - Mitarbeiter abrufen
- PATCH  /api/staff/employees/{id}/                     - Mitarbeiter ändern
- POST   /api/staff/employees/{id}/restaurants/         - Restaurant zuordnen
- DELETE /api/staff/employees/{id}/restaurants/{rid}/   - Zuordnung entfernen
- POST   /api/staff/employees/{id}/account/             - Login-Konto anlegen
- GET    /api/staff/employees/without-account/          - Mitarbeiter ohne Konto

Author: Scheduler Development Team
Version: 1.0.0
"""

from typing import Optional

from django.db.models import Q
from django.shortcuts import get_object_or_404
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response

from ..models import Employee, Restaurant
from ..permissions import IsSchedulerAdmin
from ..serializers import (
    EmployeeAccountSerializer,
    EmployeeFilterSerializer,
    EmployeeLinkSerializer,
    EmployeeSerializer,
)
from ..services import StaffService


class EmployeeViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    mixins.UpdateModelMixin,
    viewsets.GenericViewSet,
):
    """
    ViewSet für Employee-Operationen

    Mitarbeiter werden nicht direkt gelöscht: das Entfernen der letzten
    Restaurant-Zuordnung löscht den Mitarbeiter.
    """

    serializer_class = EmployeeSerializer
    permission_classes = [IsSchedulerAdmin]
    http_method_names = ["get", "post", "patch", "delete", "head", "options"]
    staff_service = StaffService()

    def get_queryset(self):
        """
        Filterung nach Restaurant und Suchfunktion
        """
        queryset = Employee.objects.prefetch_related("restaurant_links__restaurant")

        filters = EmployeeFilterSerializer(data=self.request.query_params)
        filters.is_valid(raise_exception=True)

        restaurant_id = filters.validated_data.get("restaurant")
        if restaurant_id:
            queryset = queryset.filter(restaurant_links__restaurant_id=restaurant_id)

        search = filters.validated_data.get("search")
        if search:
            queryset = queryset.filter(
                Q(name__icontains=search) | Q(email__icontains=search)
            )

        return queryset.order_by("name", "id").distinct()

    def perform_create(self, serializer):
        data = dict(serializer.validated_data)
        restaurant = data.pop("restaurant", None)
        serializer.instance = self.staff_service.create_employee(data, restaurant)

    def perform_update(self, serializer):
        # Zuordnungen laufen über den restaurants-Endpoint
        serializer.validated_data.pop("restaurant", None)
        serializer.save()

    @action(detail=True, methods=["post"], url_path="restaurants")
    def link_restaurant(self, request: Request, pk: Optional[str] = None) -> Response:
        """
        Ordnet den Mitarbeiter einem weiteren Restaurant zu.
        """
        employee = self.get_object()
        serializer = EmployeeLinkSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.staff_service.link(
            employee,
            serializer.validated_data["restaurant"],
            is_primary=serializer.validated_data["is_primary"],
        )
        employee.refresh_from_db()
        return Response(
            self.get_serializer(employee).data, status=status.HTTP_201_CREATED
        )

    @action(
        detail=True,
        methods=["delete"],
        url_path=r"restaurants/(?P<restaurant_id>[0-9]+)",
    )
    def unlink_restaurant(
        self, request: Request, pk: Optional[str] = None, restaurant_id: Optional[str] = None
    ) -> Response:
        """
        Entfernt die Zuordnung; bei der letzten Zuordnung wird der
        Mitarbeiter gelöscht.
        """
        employee = self.get_object()
        restaurant = get_object_or_404(Restaurant, pk=restaurant_id)
        result = self.staff_service.unlink(employee, restaurant)
        return Response(result.to_dict(), status=status.HTTP_200_OK)

    @action(detail=True, methods=["post"], url_path="account")
    def create_account(self, request: Request, pk: Optional[str] = None) -> Response:
        """
        Legt ein Login-Konto an. Das Passwort wird genau einmal zurückgegeben.
        """
        employee = self.get_object()
        serializer = EmployeeAccountSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user, password = self.staff_service.create_account(
            employee, serializer.validated_data.get("password") or None
        )
        return Response(
            {
                "employee_id": employee.pk,
                "username": user.username,
                "password": password,
            },
            status=status.HTTP_201_CREATED,
        )

    @action(detail=False, methods=["get"], url_path="without-account")
    def without_account(self, request: Request) -> Response:
        """
        Gibt Mitarbeiter ohne Login-Konto zurück
        """
        employees = self.get_queryset().filter(user__isnull=True)
        serializer = self.get_serializer(employees, many=True)
        return Response(serializer.data)
