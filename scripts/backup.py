"""Backup the stored profile.

Note: Copies the current snapshot (whatever backend holds it) into
`backups/` as a timestamped JSON file.
"""

from __future__ import annotations

import importlib
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from attendance_tracker.container import build_container_from_settings
from attendance_tracker.core.exceptions import PersistenceError
from attendance_tracker.settings import get_settings_module
from attendance_tracker.storage.codec import encode_profile


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container_from_settings(settings, auto_init_db=False)

    try:
        profile = container.profiles_repo.load()
    except PersistenceError as exc:
        raise SystemExit(f"Cannot read stored profile: {exc}")
    if profile is None:
        raise SystemExit("Nothing to back up: no profile has been saved yet.")

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"attendance_profile_{ts}.json"
    out_file.write_text(encode_profile(profile), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
