"""
Shift Planner Views - Restaurant Scheduler

Dieses Modul enthält die Views für das Schichtplanungs-System.

Views:
- ShiftListCreateView: Schichten eines Restaurants im Bereich / neue Schicht
- ShiftDetailView: Schicht abrufen oder löschen
- ShiftCheckView: Nur Regelprüfung, ohne zu speichern
- CalendarView: Monats- oder Wochenraster mit Schichten
- MyShiftsView: Kommende Schichten des angemeldeten Mitarbeiters

Author: Scheduler Development Team
Version: 1.0.0
"""

from datetime import timedelta

from django.shortcuts import get_object_or_404
from django.utils import timezone
from rest_framework import generics, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.employees.identity import identity_for_request
from core.employees.models import Restaurant
from core.employees.permissions import IsLinkedEmployee, IsSchedulerAdmin
from .models import Shift
from .permissions import IsAdminOrLinkedReadOnly
from .serializers import (
    CalendarQuerySerializer,
    ShiftAssignmentSerializer,
    ShiftCreateSerializer,
    ShiftRangeQuerySerializer,
    ShiftSerializer,
)
from .services import ShiftService, month_window, project_month, project_week, week_window
from .services.calendar_projector import MONTH, shift_month


class ShiftListCreateView(generics.ListCreateAPIView):
    """
    GET:  Schichten eines Restaurants, ?restaurant=<id>&start=<iso>&end=<iso>
    POST: Schicht anlegen (Prüfung über den Assignment Rule Checker)
    """

    serializer_class = ShiftSerializer
    permission_classes = [IsAdminOrLinkedReadOnly]
    pagination_class = None
    shift_service = ShiftService()

    def get_queryset(self):
        query = ShiftRangeQuerySerializer(data=self.request.query_params)
        query.is_valid(raise_exception=True)
        params = query.validated_data
        restaurant = get_object_or_404(Restaurant, pk=params["restaurant"])
        return self.shift_service.list_shifts(restaurant.pk, params["start"], params["end"])

    def create(self, request, *args, **kwargs):
        serializer = ShiftCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        shift, decision = self.shift_service.create_shift(
            employee=data["employee"],
            restaurant=data["restaurant"],
            day=data["date"],
            role=data["role"],
            start_time=data.get("start_time"),
            end_time=data.get("end_time"),
            notes=data.get("notes", ""),
            confirm=data["confirm"],
        )

        response_data = ShiftSerializer(shift).data
        response_data["decision"] = decision.to_dict()
        return Response(response_data, status=status.HTTP_201_CREATED)


class ShiftDetailView(generics.RetrieveDestroyAPIView):
    serializer_class = ShiftSerializer
    queryset = Shift.objects.select_related("employee", "restaurant")
    permission_classes = [IsAdminOrLinkedReadOnly]
    shift_service = ShiftService()

    def perform_destroy(self, instance):
        self.shift_service.delete_shift(instance)


class ShiftCheckView(APIView):
    """
    Führt nur die Regelprüfung aus.

    Response:
        {"status": "accepted" | "accepted_with_warning" | "rejected",
         "conflicts": [...], "reason": "...", "detail": "..."}
    """

    permission_classes = [IsSchedulerAdmin]
    shift_service = ShiftService()

    def post(self, request):
        serializer = ShiftAssignmentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        decision = self.shift_service.check(
            data["employee"], data["restaurant"], data["date"], data["role"]
        )
        return Response(decision.to_dict())


class CalendarView(APIView):
    """
    Kalenderraster eines Restaurants.

    Query-Parameter:
        restaurant: Restaurant-ID (Pflicht)
        mode: "month" (Standard) oder "week"
        year/month: Zielmonat der Monatsansicht (Standard: aktueller Monat)
        date: Referenztag der Wochenansicht (Standard: heute)
        request_id: Wird unverändert zurückgegeben
    """

    permission_classes = [IsAdminOrLinkedReadOnly]
    shift_service = ShiftService()

    def get(self, request):
        query = CalendarQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        params = query.validated_data
        restaurant = get_object_or_404(Restaurant, pk=params["restaurant"])

        # "Heute" einmal pro Anfrage bestimmen
        today = timezone.localdate()

        if params["mode"] == MONTH:
            year = params.get("year", today.year)
            month = params.get("month", today.month)
            start, end = month_window(year, month)
            entries = self.shift_service.window_entries(restaurant.pk, start, end)
            grid = project_month(year, month, entries, today)
            previous_year, previous_month = shift_month(year, month, -1)
            next_year, next_month = shift_month(year, month, 1)
            navigation = {
                "previous": {"year": previous_year, "month": previous_month},
                "next": {"year": next_year, "month": next_month},
            }
        else:
            reference = params.get("date", today)
            start, end = week_window(reference)
            entries = self.shift_service.window_entries(restaurant.pk, start, end)
            grid = project_week(reference, entries, today)
            navigation = {
                "previous": {"date": (start - timedelta(days=7)).isoformat()},
                "next": {"date": (start + timedelta(days=7)).isoformat()},
            }

        data = grid.to_dict()
        data["restaurant"] = {"id": restaurant.pk, "name": restaurant.name}
        data["today"] = today.isoformat()
        data["navigation"] = navigation
        data["request_id"] = params.get("request_id")
        return Response(data)


class MyShiftsView(generics.ListAPIView):
    """Kommende Schichten (ab heute) des angemeldeten Mitarbeiters, alle Restaurants."""

    serializer_class = ShiftSerializer
    permission_classes = [IsAuthenticated, IsLinkedEmployee]
    pagination_class = None

    def get_queryset(self):
        identity = identity_for_request(self.request)
        return (
            Shift.objects.filter(
                employee_id=identity.employee_id, date__gte=timezone.localdate()
            )
            .select_related("employee", "restaurant")
            .order_by("date", "start_time", "pk")
        )
