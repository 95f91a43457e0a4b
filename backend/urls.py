"""
URL configuration for the restaurant scheduler backend.

- /admin/             Django Admin (Jazzmin)
- /api/auth/          JWT Login/Logout über HTTP-only Cookies
- /api/staff/         Restaurants und Mitarbeiter
- /api/shift-planner/ Schichten und Kalender
"""

from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/auth/', include('core.employees.auth_urls')),
    path('api/staff/', include('core.employees.urls')),
    path('api/shift-planner/', include('shift_planner.urls')),
]
