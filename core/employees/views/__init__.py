"""
Staff Views Package - Restaurant Scheduler

Dieses Paket enthält alle Views für Restaurants, Mitarbeiter und die
Anmeldung.

Features:
- Restaurants anlegen und auflisten (Mitarbeiter sehen nur ihre Standorte)
- Mitarbeiter-CRUD mit Restaurant-Zuordnung und Login-Konten
- JWT-Anmeldung über HTTP-only Cookies
- Auflösung der Identität (Admin / Mitarbeiter / nicht angemeldet)

Author: Scheduler Development Team
Version: 1.0.0
"""

from .auth_views import (
    CustomTokenObtainPairView,
    CustomTokenRefreshView,
    IdentityView,
    LogoutView,
)
from .employee_views import EmployeeViewSet
from .restaurant_views import RestaurantViewSet
from .role_views import RoleListView
