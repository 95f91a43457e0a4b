"""
Staff Management URLs - Restaurant Scheduler

This module defines the URL routing for restaurant and employee management.
Uses Django REST Framework's DefaultRouter for automatic URL generation
with consistent RESTful patterns.

API Endpoints:
- /api/staff/restaurants/ - Restaurant management
- /api/staff/employees/ - Employee management incl. restaurant links and accounts
- /api/staff/roles/ - Versioned role enumeration

Author: Scheduler Development Team
Version: 1.0.0
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import EmployeeViewSet, RestaurantViewSet, RoleListView

# Django REST Framework Router für automatische URL-Generierung
router = DefaultRouter()
router.register(r'restaurants', RestaurantViewSet, basename='restaurant')
router.register(r'employees', EmployeeViewSet, basename='employee')

app_name = 'employees'

urlpatterns = [
    path('roles/', RoleListView.as_view(), name='role-list'),
    # API-Routen über Router
    path('', include(router.urls)),
]

# Die folgenden URLs werden automatisch durch den Router generiert:
#
# Restaurants:
# GET    /staff/restaurants/                              - Liste (Mitarbeiter: nur eigene)
# POST   /staff/restaurants/                              - Neues Restaurant (Admin)
# GET    /staff/restaurants/{id}/                         - Einzelnes Restaurant
#
# Employees (Admin):
# GET    /staff/employees/                                - Liste, ?restaurant=<id>
# POST   /staff/employees/                                - Neuen Employee erstellen
# GET    /staff/employees/{id}/                           - Einzelnen Employee abrufen
# PATCH  /staff/employees/{id}/                           - Employee teilweise aktualisieren
# POST   /staff/employees/{id}/restaurants/               - Restaurant zuordnen
# DELETE /staff/employees/{id}/restaurants/{rid}/         - Zuordnung entfernen
# POST   /staff/employees/{id}/account/                   - Login-Konto anlegen
# GET    /staff/employees/without-account/                - Employees ohne Konto
