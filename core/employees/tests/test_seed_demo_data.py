from io import StringIO

from django.contrib.auth.models import User
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase

from core.employees.models import Employee, EmployeeRestaurant, Restaurant, Role

"""
    Tests für den Management-Command seed_demo_data: Demo-Daten, Konten,
    Admin-Benutzer und wiederholte Ausführung.
"""


class SeedDemoDataTests(TestCase):
    def run_command(self, *args):
        out = StringIO()
        call_command("seed_demo_data", *args, stdout=out)
        return out.getvalue()

    def test_creates_restaurants_employees_and_links(self):
        self.run_command()

        self.assertEqual(
            list(Restaurant.objects.order_by("name").values_list("name", flat=True)),
            ["Seaside Grill", "The Golden Fork"],
        )
        self.assertTrue(Restaurant.objects.get(name="The Golden Fork").offers_role(Role.GELATO))
        self.assertEqual(Employee.objects.count(), 3)

        sarah = Employee.objects.get(email="sarah.j@example.com")
        links = EmployeeRestaurant.objects.filter(employee=sarah)
        self.assertEqual(
            sorted((link.restaurant.name, link.is_primary) for link in links),
            [("Seaside Grill", False), ("The Golden Fork", True)],
        )
        self.assertFalse(Employee.objects.filter(user__isnull=False).exists())

    def test_with_accounts(self):
        output = self.run_command("--with-accounts")

        self.assertEqual(Employee.objects.filter(user__isnull=False).count(), 3)
        mike = Employee.objects.get(email="mike.c@example.com")
        self.assertEqual(mike.user.username, "mike.c@example.com")
        self.assertIn("Konto mike.c@example.com / ", output)

    def test_rerun_is_idempotent(self):
        self.run_command("--with-accounts")
        output = self.run_command("--with-accounts")

        self.assertEqual(Restaurant.objects.count(), 2)
        self.assertEqual(Employee.objects.count(), 3)
        self.assertEqual(EmployeeRestaurant.objects.count(), 4)
        self.assertEqual(User.objects.count(), 3)
        self.assertNotIn("angelegt", output)

    def test_admin_user(self):
        self.run_command("--admin-username", "boss", "--admin-password", "bossPassword1")
        admin = User.objects.get(username="boss")
        self.assertTrue(admin.is_staff)
        self.assertTrue(admin.check_password("bossPassword1"))

        with self.assertRaises(CommandError):
            self.run_command("--admin-username", "boss")
