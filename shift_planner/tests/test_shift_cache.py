from datetime import date
from unittest import mock

from django.core.cache import caches
from django.db import DatabaseError, transaction
from django.test import SimpleTestCase, TestCase, TransactionTestCase, override_settings

from core.employees.models import Employee, EmployeeRestaurant, Restaurant, Role
from core.employees.services import StaffService
from shift_planner.models import Shift
from shift_planner.services import ShiftService, ShiftWindowCache
from shift_planner.services.shift_cache import months_between

"""
    Tests für den Schicht-Cache: monatsweise Invalidierung bei Anlegen und
    Löschen (auch kaskadierend) und fail-soft Laden des Kalenderbereichs.
"""

LOCMEM_CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "shift-cache-tests",
    }
}


class MonthsBetweenTests(SimpleTestCase):
    def test_single_month(self):
        self.assertEqual(months_between(date(2025, 1, 5), date(2025, 1, 11)), [(2025, 1)])

    def test_spans_year_boundary(self):
        self.assertEqual(
            months_between(date(2024, 12, 29), date(2025, 2, 1)),
            [(2024, 12), (2025, 1), (2025, 2)],
        )


@override_settings(CACHES=LOCMEM_CACHES)
class ShiftWindowCacheTests(SimpleTestCase):
    def setUp(self):
        caches["default"].clear()
        self.cache = ShiftWindowCache()
        self.loads = 0

    def loader(self):
        self.loads += 1
        return ["entry"]

    def test_second_read_is_cached(self):
        start, end = date(2025, 1, 5), date(2025, 1, 11)
        self.assertEqual(self.cache.get_or_load(1, start, end, self.loader), ["entry"])
        self.cache.get_or_load(1, start, end, self.loader)
        self.assertEqual(self.loads, 1)

    def test_invalidation_is_scoped_to_month_and_restaurant(self):
        january = (date(2025, 1, 5), date(2025, 1, 11))
        march = (date(2025, 3, 2), date(2025, 3, 8))
        self.cache.get_or_load(1, *january, self.loader)
        self.cache.get_or_load(1, *march, self.loader)
        self.cache.get_or_load(2, *january, self.loader)
        self.assertEqual(self.loads, 3)

        self.cache.invalidate(1, date(2025, 1, 20))

        self.cache.get_or_load(1, *march, self.loader)
        self.cache.get_or_load(2, *january, self.loader)
        self.assertEqual(self.loads, 3)
        self.cache.get_or_load(1, *january, self.loader)
        self.assertEqual(self.loads, 4)

    def test_invalidating_adjacent_month_refreshes_month_grid(self):
        # Der Januar-Raster enthält Tage aus Dezember und Februar
        window = (date(2024, 12, 29), date(2025, 2, 1))
        self.cache.get_or_load(1, *window, self.loader)
        self.cache.invalidate(1, date(2024, 12, 30))
        self.cache.get_or_load(1, *window, self.loader)
        self.assertEqual(self.loads, 2)

    def test_invalidate_without_counter(self):
        self.cache.invalidate(7, date(2025, 1, 1))
        self.cache.get_or_load(7, date(2025, 1, 5), date(2025, 1, 11), self.loader)
        self.assertEqual(self.loads, 1)


@override_settings(CACHES=LOCMEM_CACHES)
class ShiftWindowInvalidationTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.restaurant = Restaurant.objects.create(name="Golden Fork")
        cls.other = Restaurant.objects.create(name="Seaside Grill")
        cls.employee = Employee.objects.create(name="Jane", roles=[Role.SERVER])
        EmployeeRestaurant.objects.create(
            employee=cls.employee, restaurant=cls.restaurant, is_primary=True
        )
        EmployeeRestaurant.objects.create(employee=cls.employee, restaurant=cls.other)

    def setUp(self):
        caches["default"].clear()
        self.service = ShiftService()
        self.start, self.end = date(2025, 1, 5), date(2025, 1, 11)

    def entries(self):
        return self.service.window_entries(self.restaurant.pk, self.start, self.end)

    def test_create_and_delete_refresh_the_window(self):
        self.assertEqual(self.entries(), [])

        with self.captureOnCommitCallbacks(execute=True):
            shift, _ = self.service.create_shift(
                employee=self.employee,
                restaurant=self.restaurant,
                day=date(2025, 1, 10),
                role=Role.SERVER,
            )
        self.assertEqual([e.id for e in self.entries()], [shift.pk])

        with self.captureOnCommitCallbacks(execute=True):
            self.service.delete_shift(shift)
        self.assertEqual(self.entries(), [])

    def test_cascading_delete_refreshes_the_window(self):
        Shift.objects.create(
            employee=self.employee,
            restaurant=self.restaurant,
            date=date(2025, 1, 10),
            role=Role.SERVER,
        )
        self.assertEqual(len(self.entries()), 1)

        staff = StaffService()
        with self.captureOnCommitCallbacks(execute=True):
            staff.unlink(self.employee, self.other)
        # Zuordnung zu einem anderen Restaurant entfernt: Schicht bleibt
        self.assertEqual(len(self.entries()), 1)

        with self.captureOnCommitCallbacks(execute=True):
            result = staff.unlink(self.employee, self.restaurant)
        self.assertTrue(result.employee_deleted)
        self.assertEqual(self.entries(), [])

    def test_load_failure_is_fail_soft(self):
        with mock.patch.object(
            ShiftService, "list_shifts", side_effect=DatabaseError("connection lost")
        ):
            self.assertEqual(self.entries(), [])

    def test_invalidation_waits_for_commit(self):
        self.assertEqual(self.entries(), [])
        with self.captureOnCommitCallbacks() as callbacks:
            Shift.objects.create(
                employee=self.employee,
                restaurant=self.restaurant,
                date=date(2025, 1, 10),
                role=Role.SERVER,
            )
        # Vor dem Commit bleibt der gecachte Bereich gültig
        self.assertEqual(self.entries(), [])
        self.assertEqual(len(callbacks), 1)

        callbacks[0]()
        self.assertEqual(len(self.entries()), 1)


@override_settings(CACHES=LOCMEM_CACHES)
class ShiftWindowCommitTests(TransactionTestCase):
    """
    Ein Leser, der während einer offenen Schreibtransaktion lädt, sieht den
    alten Stand. Dieser darf nach dem Commit nicht mehr ausgeliefert werden.
    """

    def setUp(self):
        caches["default"].clear()
        self.restaurant = Restaurant.objects.create(name="Golden Fork")
        self.employee = Employee.objects.create(name="Jane", roles=[Role.SERVER])
        EmployeeRestaurant.objects.create(
            employee=self.employee, restaurant=self.restaurant, is_primary=True
        )
        self.service = ShiftService()
        self.start, self.end = date(2025, 1, 5), date(2025, 1, 11)

    def entries(self):
        return self.service.window_entries(self.restaurant.pk, self.start, self.end)

    def read_before_commit(self, visible_entries):
        # Gleichzeitiger Leser: lädt den noch nicht committeten Stand
        self.service.cache.get_or_load(
            self.restaurant.pk, self.start, self.end, lambda: visible_entries
        )

    def test_create_is_visible_after_commit(self):
        with transaction.atomic():
            shift, _ = self.service.create_shift(
                employee=self.employee,
                restaurant=self.restaurant,
                day=date(2025, 1, 10),
                role=Role.SERVER,
            )
            self.read_before_commit([])

        self.assertEqual([e.id for e in self.entries()], [shift.pk])

    def test_delete_is_visible_after_commit(self):
        shift = Shift.objects.create(
            employee=self.employee,
            restaurant=self.restaurant,
            date=date(2025, 1, 10),
            role=Role.SERVER,
        )
        stale = self.entries()
        self.assertEqual(len(stale), 1)

        with transaction.atomic():
            self.service.delete_shift(shift)
            self.read_before_commit(stale)

        self.assertEqual(self.entries(), [])

    def test_rollback_keeps_cached_window(self):
        self.assertEqual(self.entries(), [])
        loads = []

        def loader():
            loads.append(1)
            return []

        with self.assertRaises(RuntimeError):
            with transaction.atomic():
                Shift.objects.create(
                    employee=self.employee,
                    restaurant=self.restaurant,
                    date=date(2025, 1, 10),
                    role=Role.SERVER,
                )
                raise RuntimeError("abort")

        self.service.cache.get_or_load(self.restaurant.pk, self.start, self.end, loader)
        self.assertEqual(loads, [])
