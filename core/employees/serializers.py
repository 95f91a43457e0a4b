"""
Staff Management Serializers - Restaurant Scheduler

This module contains Django REST Framework serializers for restaurants,
employees and their restaurant links.

Serializers:
- RestaurantSerializer: Restaurant create/list operations
- EmployeeSerializer: Employee management with roles and restaurant links
- EmployeeLinkSerializer: Link an employee to a restaurant
- EmployeeAccountSerializer: Create a login account for an employee

Author: Scheduler Development Team
Version: 1.0.0
"""

from rest_framework import serializers
from rest_framework.validators import UniqueValidator
from .models import Employee, EmployeeRestaurant, Restaurant, Role


class RestaurantSerializer(serializers.ModelSerializer):
    """
    Serializer für Restaurant Model
    """
    special_roles = serializers.ListField(
        child=serializers.ChoiceField(
            choices=[(role.value, role.label) for role in Role.restaurant_specific()]
        ),
        required=False,
    )

    class Meta:
        model = Restaurant
        fields = [
            'id',
            'name',
            'address',
            'phone',
            'special_roles',
            'created_at',
        ]
        read_only_fields = ['id', 'created_at']

    def validate_name(self, value):
        """
        Name darf nicht nur aus Leerzeichen bestehen
        """
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Restaurant name is required.")
        return value

    def validate_special_roles(self, value):
        return sorted(set(value))


class EmployeeRestaurantSerializer(serializers.ModelSerializer):
    id = serializers.IntegerField(source="restaurant.id", read_only=True)
    name = serializers.CharField(source="restaurant.name", read_only=True)

    class Meta:
        model = EmployeeRestaurant
        fields = ["id", "name", "is_primary"]


class EmployeeSerializer(serializers.ModelSerializer):
    """
    Serializer für Employee Model mit Rollen und Restaurant-Zuordnungen

    Beim Anlegen kann optional ``restaurant`` übergeben werden; der
    Mitarbeiter wird dann direkt diesem Restaurant zugeordnet.
    """
    email = serializers.EmailField(
        required=False,
        allow_blank=True,
        allow_null=True,
        validators=[
            UniqueValidator(
                queryset=Employee.objects.all(),
                message="An employee with this email address already exists.",
            )
        ],
    )
    roles = serializers.ListField(
        child=serializers.ChoiceField(choices=Role.choices),
        allow_empty=False,
    )
    restaurant = serializers.PrimaryKeyRelatedField(
        queryset=Restaurant.objects.all(), write_only=True, required=False
    )
    restaurants = EmployeeRestaurantSerializer(
        source="restaurant_links", many=True, read_only=True
    )
    has_account = serializers.BooleanField(read_only=True)

    class Meta:
        model = Employee
        fields = [
            'id',
            'name',
            'email',
            'phone',
            'roles',
            'restaurant',
            'restaurants',
            'has_account',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Employee name is required.")
        return value

    def validate_email(self, value):
        # Leere Eingaben als "keine E-Mail" speichern (Unique-Constraint)
        return value or None

    def validate_roles(self, value):
        """
        Doppelte Rollen entfernen, Reihenfolge der Enumeration beibehalten
        """
        return [role for role in Role.values if role in set(value)]


class EmployeeLinkSerializer(serializers.Serializer):
    restaurant = serializers.PrimaryKeyRelatedField(queryset=Restaurant.objects.all())
    is_primary = serializers.BooleanField(required=False, default=False)


class EmployeeAccountSerializer(serializers.Serializer):
    """Optionales Passwort; ohne Passwort wird eines erzeugt."""
    password = serializers.CharField(
        required=False, allow_blank=True, min_length=8, write_only=True
    )


class EmployeeFilterSerializer(serializers.Serializer):
    """Query-Parameter der Mitarbeiterliste: ?restaurant=<id>&search=<text>"""
    restaurant = serializers.IntegerField(required=False, min_value=1)
    search = serializers.CharField(required=False, allow_blank=True, max_length=100)
