from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from core.employees.models import Employee, Restaurant, Role
from core.employees.services import StaffService

RESTAURANTS = [
    {
        "name": "The Golden Fork",
        "address": "123 Main St, Downtown",
        "phone": "(555) 123-4567",
        "special_roles": [Role.GELATO.value],
    },
    {
        "name": "Seaside Grill",
        "address": "456 Ocean Ave, Beachfront",
        "phone": "(555) 987-6543",
        "special_roles": [],
    },
]

EMPLOYEES = [
    {
        "name": "Sarah Johnson",
        "email": "sarah.j@example.com",
        "phone": "(555) 111-2222",
        "roles": [Role.SERVER.value, Role.GENERAL.value],
        "restaurants": ["The Golden Fork", "Seaside Grill"],
    },
    {
        "name": "Mike Chen",
        "email": "mike.c@example.com",
        "phone": "(555) 333-4444",
        "roles": [Role.DOOR.value, Role.GELATO.value],
        "restaurants": ["The Golden Fork"],
    },
    {
        "name": "Emily Rodriguez",
        "email": "emily.r@example.com",
        "phone": "(555) 555-6666",
        "roles": [Role.SERVER.value],
        "restaurants": ["Seaside Grill"],
    },
]


class Command(BaseCommand):
    help = "Erzeugt Demo-Restaurants und -Mitarbeiter und legt optional einen Admin-Benutzer an."

    def add_arguments(self, parser):
        parser.add_argument(
            "--admin-username",
            help="Legt einen Admin-Benutzer (is_staff) mit diesem Namen an.",
        )
        parser.add_argument(
            "--admin-password",
            help="Passwort für den Admin-Benutzer (Standard: zufällig erzeugt).",
        )
        parser.add_argument(
            "--with-accounts",
            action="store_true",
            help="Legt für alle Demo-Mitarbeiter Login-Konten an.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        service = StaffService()

        restaurants = {}
        for data in RESTAURANTS:
            restaurant, created = Restaurant.objects.get_or_create(
                name=data["name"],
                defaults={k: v for k, v in data.items() if k != "name"},
            )
            restaurants[restaurant.name] = restaurant
            if created:
                self.stdout.write(self.style.SUCCESS(f"Restaurant {restaurant.name} angelegt."))

        for data in EMPLOYEES:
            if Employee.objects.filter(email=data["email"]).exists():
                continue
            linked = [restaurants[name] for name in data["restaurants"]]
            fields = {k: v for k, v in data.items() if k != "restaurants"}
            employee = service.create_employee(fields, linked[0])
            for restaurant in linked[1:]:
                service.link(employee, restaurant)
            self.stdout.write(self.style.SUCCESS(f"Mitarbeiter {employee.name} angelegt."))

        if options["with_accounts"]:
            for employee in Employee.objects.filter(
                user__isnull=True, email__in=[data["email"] for data in EMPLOYEES]
            ):
                user, password = service.create_account(employee)
                self.stdout.write(f"Konto {user.username} / {password}")

        username = options["admin_username"]
        if username:
            User = get_user_model()
            if User.objects.filter(username=username).exists():
                raise CommandError(f"Benutzer {username} existiert bereits.")
            password = options["admin_password"] or service.generate_password()
            User.objects.create_user(
                username=username, password=password, is_staff=True
            )
            self.stdout.write(self.style.SUCCESS(f"Admin {username} angelegt (Passwort: {password})."))
