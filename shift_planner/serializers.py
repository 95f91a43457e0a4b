from datetime import timedelta

from rest_framework import serializers
from core.employees.models import Employee, Restaurant, Role
from .services.calendar_projector import MONTH, WEEK, week_window
from .models import Shift


class ShiftSerializer(serializers.ModelSerializer):
    employee_name = serializers.CharField(source="employee.name", read_only=True)
    restaurant_name = serializers.CharField(source="restaurant.name", read_only=True)
    start_time = serializers.TimeField(format="%H:%M", allow_null=True, read_only=True)
    end_time = serializers.TimeField(format="%H:%M", allow_null=True, read_only=True)

    class Meta:
        model = Shift
        fields = [
            "id",
            "restaurant",
            "restaurant_name",
            "employee",
            "employee_name",
            "date",
            "role",
            "start_time",
            "end_time",
            "notes",
            "created_at",
        ]
        read_only_fields = fields


class ShiftAssignmentSerializer(serializers.Serializer):
    """Eingabe für die Regelprüfung (shifts/check/)."""

    employee = serializers.PrimaryKeyRelatedField(queryset=Employee.objects.all())
    restaurant = serializers.PrimaryKeyRelatedField(queryset=Restaurant.objects.all())
    date = serializers.DateField()
    role = serializers.ChoiceField(choices=Role.choices)


class ShiftCreateSerializer(ShiftAssignmentSerializer):
    """
    Eingabe für das Anlegen einer Schicht.

    ``confirm`` bestätigt eine Schicht trotz Einteilung in einem anderen
    Restaurant am selben Tag.
    """

    start_time = serializers.TimeField(required=False, allow_null=True)
    end_time = serializers.TimeField(required=False, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True, max_length=255, default="")
    confirm = serializers.BooleanField(required=False, default=False)


class ShiftRangeQuerySerializer(serializers.Serializer):
    """Query-Parameter für shifts/?restaurant=&start=&end= (inklusive Grenzen)."""

    restaurant = serializers.IntegerField(min_value=1)
    start = serializers.DateField()
    end = serializers.DateField()

    def validate(self, attrs):
        if attrs["end"] < attrs["start"]:
            raise serializers.ValidationError({"end": "End date must not be before start date."})
        return attrs


class CalendarQuerySerializer(serializers.Serializer):
    """
    Query-Parameter der Kalenderansicht.

    Monatsansicht: ``year`` und ``month`` (Standard: aktueller Monat).
    Wochenansicht: ``date`` als Referenztag (Standard: heute).
    ``request_id`` wird unverändert zurückgegeben, damit der Client veraltete
    Antworten verwerfen kann.
    """

    restaurant = serializers.IntegerField(min_value=1)
    mode = serializers.ChoiceField(choices=[MONTH, WEEK], required=False, default=MONTH)
    # Jahr 1 und 9999 sprengen das Wochenraster am Rand von datetime.date
    year = serializers.IntegerField(required=False, min_value=2, max_value=9998)
    month = serializers.IntegerField(required=False, min_value=1, max_value=12)
    date = serializers.DateField(required=False)
    request_id = serializers.CharField(required=False, allow_blank=True, max_length=64)

    def validate(self, attrs):
        reference = attrs.get("date")
        if attrs.get("mode") == WEEK and reference is not None:
            # Woche samt Vor-/Folgewoche muss darstellbar sein
            try:
                start, end = week_window(reference)
                start - timedelta(days=7)
                end + timedelta(days=7)
            except OverflowError:
                raise serializers.ValidationError(
                    {"date": "Date is outside the supported calendar range."}
                )
        return attrs
