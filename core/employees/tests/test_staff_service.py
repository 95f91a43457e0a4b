from datetime import date

from django.contrib.auth.models import User
from django.test import TestCase, override_settings

from core.employees.models import Employee, EmployeeRestaurant, Restaurant, Role
from core.employees.services import StaffService
from core.exceptions import AlreadyLinked, NotLinked, ValidationFailed
from shift_planner.models import Shift

"""
    Tests für den StaffService: Zuordnungen, Kaskade beim Entfernen der
    letzten Zuordnung und Login-Konten.
"""


class LinkTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.golden_fork = Restaurant.objects.create(name="The Golden Fork")
        cls.seaside = Restaurant.objects.create(name="Seaside Grill")
        cls.harbor = Restaurant.objects.create(name="Harbor Cafe")

    def setUp(self):
        self.service = StaffService()

    def test_create_employee_with_restaurant_is_primary(self):
        employee = self.service.create_employee(
            {"name": "Sarah", "roles": [Role.SERVER]}, self.golden_fork
        )
        link = EmployeeRestaurant.objects.get(employee=employee)
        self.assertEqual(link.restaurant, self.golden_fork)
        self.assertTrue(link.is_primary)

    def test_create_employee_without_restaurant(self):
        employee = self.service.create_employee({"name": "Sarah", "roles": [Role.SERVER]})
        self.assertFalse(employee.restaurant_links.exists())

    def test_first_link_becomes_primary(self):
        employee = Employee.objects.create(name="Mike", roles=[Role.DOOR])
        link = self.service.link(employee, self.seaside)
        self.assertTrue(link.is_primary)
        second = self.service.link(employee, self.golden_fork)
        self.assertFalse(second.is_primary)

    def test_link_as_primary_demotes_previous(self):
        employee = self.service.create_employee({"name": "Mike", "roles": [Role.DOOR]}, self.seaside)
        self.service.link(employee, self.golden_fork, is_primary=True)
        primary = EmployeeRestaurant.objects.filter(employee=employee, is_primary=True)
        self.assertEqual([link.restaurant for link in primary], [self.golden_fork])

    def test_already_linked(self):
        employee = self.service.create_employee({"name": "Mike", "roles": [Role.DOOR]}, self.seaside)
        with self.assertRaises(AlreadyLinked):
            self.service.link(employee, self.seaside)


class UnlinkTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.golden_fork = Restaurant.objects.create(name="The Golden Fork")
        cls.seaside = Restaurant.objects.create(name="Seaside Grill")
        cls.jane = Employee.objects.create(name="Jane", roles=[Role.SERVER])
        EmployeeRestaurant.objects.create(
            employee=cls.jane, restaurant=cls.golden_fork, is_primary=True
        )
        EmployeeRestaurant.objects.create(employee=cls.jane, restaurant=cls.seaside)
        Shift.objects.create(
            employee=cls.jane, restaurant=cls.golden_fork, date=date(2025, 1, 10), role=Role.SERVER
        )
        Shift.objects.create(
            employee=cls.jane, restaurant=cls.seaside, date=date(2025, 1, 11), role=Role.SERVER
        )

    def setUp(self):
        self.service = StaffService()

    def test_removing_one_of_several_links_keeps_employee(self):
        result = self.service.unlink(self.jane, self.seaside)
        self.assertFalse(result.employee_deleted)
        self.assertIsNone(result.promoted_restaurant_id)
        self.assertTrue(Employee.objects.filter(pk=self.jane.pk).exists())
        self.assertEqual(
            list(EmployeeRestaurant.objects.filter(employee=self.jane).values_list("restaurant", flat=True)),
            [self.golden_fork.pk],
        )
        # Schichten bleiben erhalten, auch die im entfernten Restaurant
        self.assertEqual(Shift.objects.filter(employee=self.jane).count(), 2)

    def test_removing_primary_promotes_remaining_link(self):
        result = self.service.unlink(self.jane, self.golden_fork)
        self.assertEqual(result.promoted_restaurant_id, self.seaside.pk)
        self.assertTrue(
            EmployeeRestaurant.objects.get(employee=self.jane, restaurant=self.seaside).is_primary
        )

    def test_removing_last_link_deletes_employee_and_shifts(self):
        self.service.unlink(self.jane, self.seaside)
        result = self.service.unlink(self.jane, self.golden_fork)
        self.assertTrue(result.employee_deleted)
        self.assertEqual(result.to_dict(), {"employee_deleted": True, "promoted_restaurant_id": None})
        self.assertFalse(Employee.objects.filter(pk=self.jane.pk).exists())
        self.assertFalse(Shift.objects.exists())

    def test_unlink_unknown_restaurant(self):
        harbor = Restaurant.objects.create(name="Harbor Cafe")
        with self.assertRaises(NotLinked):
            self.service.unlink(self.jane, harbor)


class AccountTests(TestCase):
    def setUp(self):
        self.service = StaffService()
        self.employee = Employee.objects.create(
            name="Sarah", email="sarah.j@example.com", roles=[Role.SERVER]
        )

    @override_settings(SCHEDULER_ACCOUNT_PASSWORD_LENGTH=12)
    def test_generated_password(self):
        user, password = self.service.create_account(self.employee)
        self.assertEqual(len(password), 12)
        self.assertEqual(user.username, "sarah.j@example.com")
        self.assertTrue(user.check_password(password))
        self.employee.refresh_from_db()
        self.assertTrue(self.employee.has_account)

    def test_given_password(self):
        user, password = self.service.create_account(self.employee, "chosenPassword1")
        self.assertEqual(password, "chosenPassword1")
        self.assertTrue(user.check_password("chosenPassword1"))

    def test_second_account_is_rejected(self):
        self.service.create_account(self.employee)
        with self.assertRaises(ValidationFailed):
            self.service.create_account(self.employee)

    def test_email_is_required(self):
        employee = Employee.objects.create(name="Mike", roles=[Role.DOOR])
        with self.assertRaises(ValidationFailed):
            self.service.create_account(employee)

    def test_username_taken(self):
        User.objects.create_user(username="sarah.j@example.com", password="x")
        with self.assertRaises(ValidationFailed):
            self.service.create_account(self.employee)

    def test_generate_password_charset(self):
        password = StaffService.generate_password(32)
        self.assertEqual(len(password), 32)
        self.assertTrue(set(password) <= set(
            "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789!@#$%^&*"
        ))
