from __future__ import annotations

import csv
import io
from typing import List, Optional

from ..attendance.calculator import PercentageCalculator, StandardPercentageCalculator
from ..core.constants import CSV_HEADER
from ..core.exceptions import ExportError
from ..subjects.model import Profile


def export_rows(profile: Profile, *, calculator: Optional[PercentageCalculator] = None) -> List[list]:
    """Header + one row per subject, in profile order."""

    if not profile.subjects:
        raise ExportError("No data to export")

    calculator = calculator or StandardPercentageCalculator()
    rows: List[list] = [list(CSV_HEADER)]
    for s in profile.subjects:
        rows.append([s.name, s.present, s.absent, f"{calculator.percentage(s.present, s.absent)}%"])
    return rows


def export_csv(
    profile: Profile,
    *,
    calculator: Optional[PercentageCalculator] = None,
    quoted: bool = False,
) -> str:
    """Render the attendance summary as CSV text.

    The default output joins fields with bare commas and does not escape
    subject names, matching files produced by earlier versions. Pass
    ``quoted=True`` to quote names that contain commas, quotes or newlines.
    """

    rows = export_rows(profile, calculator=calculator)

    if not quoted:
        return "\n".join(",".join(str(v) for v in row) for row in rows)

    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerows(rows)
    return out.getvalue().rstrip("\n")
