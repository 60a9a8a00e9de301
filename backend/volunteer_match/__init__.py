"""Volunteer matching API: profiles, jobs and applications held in memory."""

__version__ = "0.1.0"
