from datetime import date

from django.test import SimpleTestCase, TestCase

from core.employees.models import Employee, EmployeeRestaurant, Restaurant, Role
from core.exceptions import (
    DuplicateShift,
    NotLinked,
    RoleMismatch,
    RoleNotOffered,
    ValidationFailed,
)
from shift_planner.models import Shift
from shift_planner.services import Conflict, DecisionStatus, OrmShiftLookup, check_assignment

"""
    Tests für den Assignment Rule Checker: Rollen, Doppelschichten im selben
    Restaurant (harte Sperre) und Schichten in anderen Restaurants (Warnung).
"""


class FakeLookup:
    """ShiftLookup ohne Datenbank."""

    def __init__(self, linked=True, duplicate=None, conflicts=None):
        self.linked = linked
        self.duplicate = duplicate
        self.conflicts = conflicts or []

    def is_linked(self, employee_id, restaurant_id):
        return self.linked

    def find_duplicate(self, employee_id, restaurant_id, day):
        return self.duplicate

    def find_other_locations(self, employee_id, day, exclude_restaurant_id):
        return list(self.conflicts)


class CheckAssignmentUnitTests(SimpleTestCase):
    def setUp(self):
        self.employee = Employee(pk=1, name="Jane", roles=[Role.SERVER, Role.GELATO])
        self.restaurant = Restaurant(pk=10, name="A", special_roles=[])
        self.day = date(2025, 1, 10)

    def test_accepted_without_conflicts(self):
        decision = check_assignment(
            self.employee, self.restaurant, self.day, Role.SERVER, FakeLookup()
        )
        self.assertEqual(decision.status, DecisionStatus.ACCEPTED)
        self.assertTrue(decision.allowed)
        self.assertFalse(decision.has_warning)
        self.assertIsNone(decision.error)

    def test_role_not_held_is_role_mismatch(self):
        for role in [Role.DOOR, Role.GENERAL]:
            decision = check_assignment(
                self.employee, self.restaurant, self.day, role, FakeLookup()
            )
            self.assertEqual(decision.status, DecisionStatus.REJECTED)
            self.assertIsInstance(decision.error, RoleMismatch)
            self.assertEqual(decision.error.details["missing_role"], role)

    def test_unknown_role_is_validation_error(self):
        decision = check_assignment(
            self.employee, self.restaurant, self.day, "chef", FakeLookup()
        )
        self.assertIsInstance(decision.error, ValidationFailed)

    def test_restaurant_specific_role_must_be_offered(self):
        decision = check_assignment(
            self.employee, self.restaurant, self.day, Role.GELATO, FakeLookup()
        )
        self.assertIsInstance(decision.error, RoleNotOffered)

        self.restaurant.special_roles = [Role.GELATO.value]
        decision = check_assignment(
            self.employee, self.restaurant, self.day, Role.GELATO, FakeLookup()
        )
        self.assertEqual(decision.status, DecisionStatus.ACCEPTED)

    def test_role_mismatch_is_checked_before_link(self):
        decision = check_assignment(
            self.employee, self.restaurant, self.day, Role.DOOR, FakeLookup(linked=False)
        )
        self.assertIsInstance(decision.error, RoleMismatch)

    def test_unlinked_employee_is_rejected(self):
        decision = check_assignment(
            self.employee, self.restaurant, self.day, Role.SERVER, FakeLookup(linked=False)
        )
        self.assertIsInstance(decision.error, NotLinked)

    def test_duplicate_is_hard_block(self):
        decision = check_assignment(
            self.employee,
            self.restaurant,
            self.day,
            Role.SERVER,
            FakeLookup(duplicate=99, conflicts=[Conflict(5, 20, "B", Role.SERVER)]),
        )
        self.assertEqual(decision.status, DecisionStatus.REJECTED)
        self.assertIsInstance(decision.error, DuplicateShift)
        self.assertEqual(decision.error.details["existing_shift_id"], 99)
        self.assertEqual(decision.error.status_code, 409)

    def test_other_location_is_warning(self):
        conflict = Conflict(shift_id=5, restaurant_id=20, restaurant_name="B", role=Role.SERVER)
        decision = check_assignment(
            self.employee,
            self.restaurant,
            self.day,
            Role.SERVER,
            FakeLookup(conflicts=[conflict]),
        )
        self.assertEqual(decision.status, DecisionStatus.ACCEPTED_WITH_WARNING)
        self.assertTrue(decision.allowed)
        self.assertEqual(
            decision.to_dict(),
            {
                "status": "accepted_with_warning",
                "conflicts": [
                    {
                        "shift_id": 5,
                        "restaurant_id": 20,
                        "restaurant_name": "B",
                        "role": "server",
                    }
                ],
            },
        )


class JaneExampleTests(TestCase):
    """Jane (nur server) arbeitet in A und B; in A hat sie am 10.01.2025 bereits eine Schicht."""

    @classmethod
    def setUpTestData(cls):
        cls.restaurant_a = Restaurant.objects.create(name="A")
        cls.restaurant_b = Restaurant.objects.create(name="B")
        cls.jane = Employee.objects.create(name="Jane", roles=[Role.SERVER])
        EmployeeRestaurant.objects.create(
            employee=cls.jane, restaurant=cls.restaurant_a, is_primary=True
        )
        EmployeeRestaurant.objects.create(employee=cls.jane, restaurant=cls.restaurant_b)
        cls.day = date(2025, 1, 10)
        cls.existing = Shift.objects.create(
            employee=cls.jane, restaurant=cls.restaurant_a, date=cls.day, role=Role.SERVER
        )

    def check(self, restaurant, role):
        return check_assignment(self.jane, restaurant, self.day, role, OrmShiftLookup())

    def test_door_is_role_mismatch(self):
        decision = self.check(self.restaurant_a, Role.DOOR)
        self.assertIsInstance(decision.error, RoleMismatch)

    def test_second_shift_at_same_restaurant_is_duplicate(self):
        decision = self.check(self.restaurant_a, Role.SERVER)
        self.assertIsInstance(decision.error, DuplicateShift)
        self.assertEqual(decision.error.details["existing_shift_id"], self.existing.pk)

    def test_other_restaurant_is_accepted_with_warning(self):
        decision = self.check(self.restaurant_b, Role.SERVER)
        self.assertEqual(decision.status, DecisionStatus.ACCEPTED_WITH_WARNING)
        self.assertEqual(
            [(c.restaurant_name, c.role) for c in decision.conflicts],
            [("A", "server")],
        )

    def test_other_day_is_accepted(self):
        decision = check_assignment(
            self.jane, self.restaurant_b, date(2025, 1, 11), Role.SERVER, OrmShiftLookup()
        )
        self.assertEqual(decision.status, DecisionStatus.ACCEPTED)
