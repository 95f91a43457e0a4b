"""
Shift Planner Signal Handlers

Invalidiert den Schicht-Cache für den betroffenen Monat, sobald eine Schicht
angelegt oder gelöscht wird. post_delete greift auch bei kaskadierenden
Löschungen (z. B. wenn ein Mitarbeiter mit seiner letzten Zuordnung
entfernt wird).

Die Invalidierung läuft erst nach dem Commit der Transaktion: ein
gleichzeitiger Leser sieht vorher die alte Zeile und würde sonst den alten
Stand unter der neuen Generation cachen. Bei einem Rollback entfällt sie.

Author: Scheduler Development Team
Version: 1.0.0
"""

from datetime import date

from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from .models import Shift
from .services.shift_cache import ShiftWindowCache


def _invalidate(restaurant_id, day):
    if isinstance(day, str):
        # Schichten, die direkt mit ISO-String angelegt wurden
        day = date.fromisoformat(day)
    ShiftWindowCache().invalidate(restaurant_id, day)


def _invalidate_on_commit(shift, using=None):
    # Werte jetzt festhalten, die Instanz kann sich bis zum Commit ändern
    restaurant_id, day = shift.restaurant_id, shift.date
    transaction.on_commit(lambda: _invalidate(restaurant_id, day), using=using)


@receiver(post_save, sender=Shift)
def invalidate_on_create(sender, instance, created, **kwargs):
    if created:
        _invalidate_on_commit(instance, kwargs.get("using"))


@receiver(post_delete, sender=Shift)
def invalidate_on_delete(sender, instance, **kwargs):
    _invalidate_on_commit(instance, kwargs.get("using"))
