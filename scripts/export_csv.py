"""Write an attendance export file from the command line."""

from __future__ import annotations

import argparse
import importlib

from dotenv import load_dotenv

from attendance_tracker.container import build_container_from_settings
from attendance_tracker.core.exceptions import ExportError, PersistenceError
from attendance_tracker.settings import get_settings_module


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--xlsx", action="store_true", help="write a spreadsheet instead of CSV")
    parser.add_argument("--quoted", action="store_true", help="quote subject names that need it")
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container_from_settings(settings, auto_init_db=False)

    try:
        container.attendance_store.initialize()
        if args.xlsx:
            path = container.export_service.write_xlsx()
        else:
            path = container.export_service.write_csv(quoted=args.quoted)
    except (PersistenceError, ExportError) as exc:
        raise SystemExit(f"Export failed: {exc}")
    print(f"OK: Export written: {path}")


if __name__ == "__main__":
    main()
