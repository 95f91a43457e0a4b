"""
Shift Window Cache - Restaurant Scheduler

Cacht "Schichten von Restaurant R im Bereich [start, end]" im Django Cache
(LocMem in der Entwicklung, Redis wenn REDIS_URL gesetzt ist).

Invalidierung ist auf Monate begrenzt: jeder Monat eines Restaurants hat
einen Generationszähler, der bei jedem Schreibzugriff auf einen Tag dieses
Monats erhöht wird. Der Cache-Key eines Bereichs enthält die Generationen
aller Monate, die der Bereich berührt. Ein Schreibzugriff macht damit nur
die Bereiche ungültig, die den betroffenen Monat überlappen.

Author: Scheduler Development Team
Version: 1.0.0
"""

import logging
import time
from datetime import date
from typing import Callable, List

from django.conf import settings
from django.core.cache import cache as default_cache

from .calendar_projector import ShiftEntry

logger = logging.getLogger(__name__)

KEY_PREFIX = "shift-window"


def months_between(start: date, end: date) -> List[tuple]:
    """Alle (Jahr, Monat)-Paare, die der Bereich [start, end] berührt."""
    months = []
    year, month = start.year, start.month
    while (year, month) <= (end.year, end.month):
        months.append((year, month))
        year, month = (year + 1, 1) if month == 12 else (year, month + 1)
    return months


class ShiftWindowCache:
    """
    Cache für Schichtlisten eines Restaurants in einem Datumsbereich.

    Args:
        backend: Django Cache-Backend (Standard: ``default``)
        timeout: Lebensdauer eines Eintrags in Sekunden
    """

    def __init__(self, backend=None, timeout=None):
        self.backend = backend or default_cache
        self.timeout = (
            timeout
            if timeout is not None
            else getattr(settings, "SCHEDULER_CALENDAR_CACHE_TIMEOUT", 300)
        )

    def _generation_key(self, restaurant_id: int, year: int, month: int) -> str:
        return f"{KEY_PREFIX}:gen:{restaurant_id}:{year:04d}-{month:02d}"

    def _generation(self, restaurant_id: int, year: int, month: int) -> int:
        key = self._generation_key(restaurant_id, year, month)
        generation = self.backend.get(key)
        if generation is None:
            # Zeitbasierter Startwert: ein verdrängter Zähler beginnt nie
            # wieder bei einem bereits benutzten Wert.
            generation = time.time_ns()
            self.backend.add(key, generation, None)
            generation = self.backend.get(key, generation)
        return generation

    def window_key(self, restaurant_id: int, start: date, end: date) -> str:
        generations = "-".join(
            str(self._generation(restaurant_id, year, month))
            for year, month in months_between(start, end)
        )
        return (
            f"{KEY_PREFIX}:{restaurant_id}:{start.isoformat()}:{end.isoformat()}:{generations}"
        )

    def get_or_load(
        self,
        restaurant_id: int,
        start: date,
        end: date,
        loader: Callable[[], List[ShiftEntry]],
    ) -> List[ShiftEntry]:
        """
        Liefert die Schichten des Bereichs aus dem Cache oder lädt sie.

        Fehler des Loaders werden nicht abgefangen und nicht gecacht.
        """
        key = self.window_key(restaurant_id, start, end)
        entries = self.backend.get(key)
        if entries is not None:
            return entries
        entries = list(loader())
        self.backend.set(key, entries, self.timeout)
        return entries

    def invalidate(self, restaurant_id: int, day: date) -> None:
        """Macht alle Bereiche ungültig, die den Monat von ``day`` berühren."""
        key = self._generation_key(restaurant_id, day.year, day.month)
        try:
            self.backend.incr(key)
        except ValueError:
            # Zähler existiert (noch) nicht: neuer Startwert genügt
            self.backend.set(key, time.time_ns(), None)
        logger.debug(
            f"Schicht-Cache invalidiert: Restaurant {restaurant_id}, {day.year}-{day.month:02d}"
        )
