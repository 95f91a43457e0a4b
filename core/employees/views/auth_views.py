"""
Scheduler Authentication Views

This module provides the authentication endpoints for the scheduler,
storing JWT tokens in HTTP-only cookies and exposing the resolved identity.

Views:
- CustomTokenObtainPairView: JWT login, tokens are set as cookies
- CustomTokenRefreshView: Refresh using the refresh_token cookie
- LogoutView: Blacklists the refresh token and clears the cookies
- IdentityView: Returns the caller's identity (admin, employee, unauthenticated)

Author: Scheduler Development Team
Version: 1.0.0
"""

import logging

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.serializers import TokenRefreshSerializer
from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from ..identity import identity_for_request
from ..models import Employee

logger = logging.getLogger(__name__)


def _set_token_cookies(response, refresh=None, access=None):
    """
    Setzt refresh_token und access_token als HTTP-only Cookies.

    samesite="None" wird für Cross-Site-Requests des Frontends benötigt.
    """
    if refresh:
        response.set_cookie(
            "refresh_token",
            refresh,
            httponly=True,
            secure=True,
            samesite="None",
            path="/",
            max_age=settings.SIMPLE_JWT["REFRESH_TOKEN_LIFETIME"],
        )
    if access:
        response.set_cookie(
            "access_token",
            access,
            httponly=True,
            secure=True,
            samesite="None",
            path="/",
            max_age=settings.SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"],
        )


class CustomTokenObtainPairView(TokenObtainPairView):
    """
    Custom view extending SimpleJWT's TokenObtainPairView to store JWT tokens in secure HTTP-only cookies
    instead of returning them in the response body.
    - Calls the parent class's `post` method to get access/refresh tokens.
    - Removes tokens from the response payload to avoid exposing them in JSON.
    - Adds the resolved identity to the response payload.
    """

    def post(self, request, *args, **kwargs):
        response = super().post(request, *args, **kwargs)
        if response.status_code == 200:
            data = response.data
            refresh = data.pop("refresh", None)
            access = data.pop("access", None)
            _set_token_cookies(response, refresh=refresh, access=access)
            data["detail"] = "Login successful."
        return response


class CustomTokenRefreshView(TokenRefreshView):
    """
    Custom view extending SimpleJWT's TokenRefreshView to refresh JWT tokens and store them
    in secure HTTP-only cookies instead of returning them in the response body.
    """

    def post(self, request, *args, **kwargs):
        refresh_token = request.COOKIES.get("refresh_token")
        if not refresh_token:
            return Response(
                {"detail": "Refresh token not provided"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        serializer = TokenRefreshSerializer(data={"refresh": refresh_token})
        try:
            serializer.is_valid(raise_exception=True)
        except TokenError as e:
            return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        data = serializer.validated_data
        response = Response(status=status.HTTP_200_OK)
        _set_token_cookies(
            response, refresh=data.get("refresh"), access=data.get("access")
        )
        return response


class LogoutView(APIView):
    """
    API endpoint to handle user logout by invalidating JWT tokens and clearing cookies.
    - Blacklists the refresh token from the cookie, if present.
    - Invalid or expired refresh tokens are logged; the cookies are cleared anyway.
    - Always returns a 205 Reset Content response.
    """

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        refresh_token = request.COOKIES.get("refresh_token")
        if refresh_token:
            try:
                RefreshToken(refresh_token).blacklist()
            except TokenError as e:
                logger.info(f"Logout mit ungültigem Refresh-Token: {e}")

        response = Response(
            {"detail": "Successfully logged out."}, status=status.HTTP_205_RESET_CONTENT
        )
        response.delete_cookie("refresh_token")
        response.delete_cookie("access_token")
        return response


class IdentityView(APIView):
    """
    Liefert die Identität des Aufrufers.

    Response:
        {
            "kind": "admin" | "employee" | "unauthenticated",
            "employee_id": 12 | null,
            "username": "jane@example.com" | null,
            "employee_name": "Jane Doe" | null
        }
    """

    permission_classes = [AllowAny]

    def get(self, request: Request) -> Response:
        identity = identity_for_request(request)
        data = identity.to_dict()
        data["username"] = request.user.get_username() if identity.is_authenticated else None
        data["employee_name"] = None
        if identity.is_employee:
            data["employee_name"] = (
                Employee.objects.filter(pk=identity.employee_id)
                .values_list("name", flat=True)
                .first()
            )
        return Response(data)
