"""Example: using the service layer without Flask.

Controllers are a thin layer; the attendance rules live in AttendanceStore.
"""

import importlib

from attendance_tracker.container import build_container_from_settings
from attendance_tracker.core.enums import OnboardingState
from attendance_tracker.settings import get_settings_module


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container_from_settings(settings)
    store = container.attendance_store

    if store.initialize() == OnboardingState.NAME_PROMPT:
        store.set_name("Demo")
    if not store.profile.subjects:
        store.add_subject("Math")
    store.record_attendance(0, True)

    print(store.compute_total_attendance())
    print(store.export_csv())


if __name__ == "__main__":
    main()
