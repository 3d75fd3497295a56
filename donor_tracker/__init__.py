"""Donor tracker: events, donors, and PMM-reviewed invitation tasks."""

__version__ = "1.0.0"
