"""Attendance Tracker package.

Personal attendance tracking organized by feature modules (subjects,
attendance, storage, export) with a thin Flask controller layer on top of
the service/repository layers.
"""

__version__ = "1.0.0"
