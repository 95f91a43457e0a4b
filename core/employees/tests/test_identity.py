from django.contrib.auth.models import AnonymousUser, User
from django.test import TestCase
from rest_framework import status

from core.employees.identity import IdentityKind, resolve_identity
from core.employees.models import Employee, Role

"""
    Tests für die Auflösung der Identität: Admin, Mitarbeiter oder nicht angemeldet.
"""


class ResolveIdentityTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.admin = User.objects.create_user(username="admin", password="x", is_staff=True)
        cls.superuser = User.objects.create_superuser(username="root", password="x")
        cls.staff_user = User.objects.create_user(username="jane@example.com", password="x")
        cls.employee = Employee.objects.create(
            name="Jane", email="jane@example.com", roles=[Role.SERVER], user=cls.staff_user
        )
        cls.stranger = User.objects.create_user(username="stranger", password="x")

    def test_anonymous(self):
        self.assertEqual(resolve_identity(AnonymousUser()).kind, IdentityKind.UNAUTHENTICATED)
        self.assertEqual(resolve_identity(None).kind, IdentityKind.UNAUTHENTICATED)

    def test_admin(self):
        self.assertTrue(resolve_identity(self.admin).is_admin)
        self.assertTrue(resolve_identity(self.superuser).is_admin)
        self.assertIsNone(resolve_identity(self.admin).employee_id)

    def test_employee(self):
        identity = resolve_identity(self.staff_user)
        self.assertEqual(identity.kind, IdentityKind.EMPLOYEE)
        self.assertEqual(identity.employee_id, self.employee.pk)
        self.assertEqual(
            identity.to_dict(), {"kind": "employee", "employee_id": self.employee.pk}
        )

    def test_account_without_employee_is_unauthenticated(self):
        identity = resolve_identity(self.stranger)
        self.assertFalse(identity.is_authenticated)


class IdentityViewTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.user = User.objects.create_user(username="jane@example.com", password="janePassword1")
        Employee.objects.create(
            name="Jane", email="jane@example.com", roles=[Role.SERVER], user=cls.user
        )

    def test_me_anonymous(self):
        response = self.client.get("/api/auth/me/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()["kind"], "unauthenticated")
        self.assertIsNone(response.json()["username"])

    def test_me_after_login(self):
        response = self.client.post(
            "/api/auth/token/",
            {"username": "jane@example.com", "password": "janePassword1"},
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertNotIn("access", response.json())
        self.client.cookies["access_token"] = response.cookies["access_token"].value

        response = self.client.get("/api/auth/me/")
        data = response.json()
        self.assertEqual(data["kind"], "employee")
        self.assertEqual(data["employee_name"], "Jane")
        self.assertEqual(data["username"], "jane@example.com")
