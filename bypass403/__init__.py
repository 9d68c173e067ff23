"""Probe URLs that answer 403 Forbidden with request variations that may bypass access rules."""

__version__ = "1.0.0"