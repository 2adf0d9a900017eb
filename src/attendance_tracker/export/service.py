from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Callable, Optional

import pandas as pd

from ..common.datetime_utils import now_epoch_millis
from ..core.constants import EXPORT_FILENAME_PREFIX
from ..core.exceptions import ExportError
from .csv_exporter import export_rows

logger = logging.getLogger(__name__)

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


class ExportService:
    """Writes export artifacts for the current profile.

    Filenames follow ``attendance_<unix-epoch-millis>.<ext>`` and never
    overwrite an earlier export in ``export_dir``.
    """

    def __init__(self, store, export_dir: Path | str, *, clock: Optional[Callable[[], int]] = None):
        self._store = store
        self._export_dir = Path(export_dir)
        self._clock = clock or now_epoch_millis

    @property
    def export_dir(self) -> Path:
        return self._export_dir

    def next_filename(self, extension: str) -> str:
        millis = int(self._clock())
        while (self._export_dir / f"{EXPORT_FILENAME_PREFIX}{millis}.{extension}").exists():
            millis += 1
        return f"{EXPORT_FILENAME_PREFIX}{millis}.{extension}"

    def write_csv(self, *, quoted: bool = False) -> Path:
        content = self._store.export_csv(quoted=quoted)
        try:
            self._export_dir.mkdir(parents=True, exist_ok=True)
            path = self._export_dir / self.next_filename("csv")
            with path.open("x", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as exc:
            raise ExportError("Failed to export CSV file") from exc
        logger.info("CSV export written to %s", path)
        return path

    def build_dataframe(self) -> pd.DataFrame:
        header, *rows = export_rows(self._store.profile, calculator=self._store.calculator)
        return pd.DataFrame(rows, columns=header)

    def xlsx_bytes(self) -> bytes:
        """Spreadsheet kept in memory (not written to disk), for downloads."""

        df = self.build_dataframe()
        output = io.BytesIO()
        with pd.ExcelWriter(output, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name="Attendance")
        return output.getvalue()

    def write_xlsx(self) -> Path:
        content = self.xlsx_bytes()
        try:
            self._export_dir.mkdir(parents=True, exist_ok=True)
            path = self._export_dir / self.next_filename("xlsx")
            with path.open("xb") as f:
                f.write(content)
        except OSError as exc:
            raise ExportError("Failed to export spreadsheet") from exc
        logger.info("Spreadsheet export written to %s", path)
        return path
