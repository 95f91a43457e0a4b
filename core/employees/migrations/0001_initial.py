from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Restaurant",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=120, unique=True, verbose_name="Name")),
                ("address", models.CharField(blank=True, max_length=255, verbose_name="Adresse")),
                ("phone", models.CharField(blank=True, max_length=40, verbose_name="Telefon")),
                ("special_roles", models.JSONField(blank=True, default=list, help_text="Restaurant-specific roles offered here (e.g. ['gelato'])", verbose_name="Standortspezifische Rollen")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Erstellt am")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Aktualisiert am")),
            ],
            options={
                "verbose_name": "Restaurant",
                "verbose_name_plural": "Restaurants",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Employee",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=120, verbose_name="Name")),
                ("email", models.EmailField(blank=True, help_text="Used as the login name when an account is created", max_length=254, null=True, unique=True, verbose_name="E-Mail-Adresse")),
                ("phone", models.CharField(blank=True, max_length=40, verbose_name="Telefon")),
                ("roles", models.JSONField(default=list, help_text="Subset of door, gelato, server, general", verbose_name="Rollen")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Erstellt am")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Aktualisiert am")),
                ("user", models.OneToOneField(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="employee_profile", to=settings.AUTH_USER_MODEL, verbose_name="Login-Konto")),
            ],
            options={
                "verbose_name": "Mitarbeiter",
                "verbose_name_plural": "Mitarbeiter",
                "ordering": ["name"],
                "indexes": [models.Index(fields=["name"], name="employee_name_idx")],
            },
        ),
        migrations.CreateModel(
            name="EmployeeRestaurant",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("is_primary", models.BooleanField(default=False, verbose_name="Hauptstandort")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("employee", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="restaurant_links", to="employees.employee")),
                ("restaurant", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="employee_links", to="employees.restaurant")),
            ],
            options={
                "verbose_name": "Standort-Zuordnung",
                "verbose_name_plural": "Standort-Zuordnungen",
                "ordering": ["created_at", "id"],
                "unique_together": {("employee", "restaurant")},
            },
        ),
        migrations.AddField(
            model_name="employee",
            name="restaurants",
            field=models.ManyToManyField(blank=True, related_name="employees", through="employees.EmployeeRestaurant", to="employees.restaurant"),
        ),
    ]
