"""
Shift Planner Package - Restaurant Scheduler

Dieses Paket enthält alle Module für die Schichtplanung der Restaurants.

Features:
- Schichten anlegen und löschen (Admin)
- Regelprüfung: Rollen, Doppelschichten, Konflikte zwischen Standorten
- Monats- und Wochenkalender pro Restaurant
- Persönlicher Schichtplan für Mitarbeiter

Author: Scheduler Development Team
Version: 1.0.0
"""
