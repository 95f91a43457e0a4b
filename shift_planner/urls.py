from django.urls import path
from .views import (
    CalendarView,
    MyShiftsView,
    ShiftCheckView,
    ShiftDetailView,
    ShiftListCreateView,
)

app_name = "shift_planner"

urlpatterns = [
    # Schichten
    path("shifts/", ShiftListCreateView.as_view(), name="shift-list"),
    path("shifts/check/", ShiftCheckView.as_view(), name="shift-check"),
    path("shifts/<int:pk>/", ShiftDetailView.as_view(), name="shift-detail"),
    # Kalender
    path("calendar/", CalendarView.as_view(), name="calendar"),
    # Eigene Schichten (Mitarbeiter)
    path("my-shifts/", MyShiftsView.as_view(), name="my-shifts"),
]
