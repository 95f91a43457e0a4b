from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("employees", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Shift",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("date", models.DateField(verbose_name="Datum")),
                ("role", models.CharField(choices=[("door", "Door"), ("gelato", "Gelato"), ("server", "Server"), ("general", "General")], max_length=10, verbose_name="Rolle")),
                ("start_time", models.TimeField(blank=True, null=True, verbose_name="Beginn")),
                ("end_time", models.TimeField(blank=True, null=True, verbose_name="Ende")),
                ("notes", models.CharField(blank=True, max_length=255, verbose_name="Notiz")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("employee", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="shifts", to="employees.employee", verbose_name="Mitarbeiter")),
                ("restaurant", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="shifts", to="employees.restaurant", verbose_name="Restaurant")),
            ],
            options={
                "verbose_name": "Schicht",
                "verbose_name_plural": "Schichten",
                "ordering": ["date", "role", "start_time"],
                "indexes": [
                    models.Index(fields=["restaurant", "date"], name="shift_restaurant_date_idx"),
                    models.Index(fields=["employee", "date"], name="shift_employee_date_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("employee", "restaurant", "date"), name="unique_shift_per_employee_restaurant_day"),
                ],
            },
        ),
    ]
