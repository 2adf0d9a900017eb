"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_STORAGE_KEY = "@attendance_data"
EXPORT_FILENAME_PREFIX = "attendance_"
CSV_HEADER = ("Subject", "Classes Attended", "Classes Missed", "Attendance Percentage")
PERCENTAGE_PLACES = 2
