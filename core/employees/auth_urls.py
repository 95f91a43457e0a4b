"""
Authentication URLs - Restaurant Scheduler

API Endpoints:
- /api/auth/token/ - Login, setzt access_token/refresh_token Cookies
- /api/auth/token/refresh/ - Erneuert die Cookies
- /api/auth/logout/ - Logout (Refresh-Token wird gesperrt)
- /api/auth/me/ - Identität des Aufrufers

Author: Scheduler Development Team
Version: 1.0.0
"""

from django.urls import path
from .views import (
    CustomTokenObtainPairView,
    CustomTokenRefreshView,
    IdentityView,
    LogoutView,
)

app_name = 'auth'

urlpatterns = [
    # Authentication endpoints (JWT token management)
    path('token/', CustomTokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('token/refresh/', CustomTokenRefreshView.as_view(), name='token_refresh'),
    path('logout/', LogoutView.as_view(), name='logout'),
    path('me/', IdentityView.as_view(), name='me'),
]
