"""Keyword monitoring helpers: control identifiers, keyword storage and highlighting, layout settings and warning records."""

__version__ = "0.1.0"