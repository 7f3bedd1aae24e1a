"""
PassForge Batch Export
=======================

Serialises a :class:`~passforge.core.models.BatchResult` to CSV or JSON.

- CSV: a ``Password`` header row, then one password per row, quoted by
  the :mod:`csv` module where needed.
- JSON: ``{"passwords": [...], "count": n, "generated_at": "<iso>"}``.
"""

from __future__ import annotations

import csv
import io
import json
from pathlib import Path
from typing import Any, Iterable

from passforge.core.exceptions import InvalidConfiguration
from passforge.core.models import BatchResult

EXPORT_FORMATS: tuple[str, ...] = ("csv", "json")


class BatchReportGenerator:
    """Builds export documents for generated password batches.

    Usage::

        generator = BatchReportGenerator()
        generator.write(batch, Path("passwords.csv"), "csv")
        payload = generator.to_json(batch)
    """

    @staticmethod
    def to_csv(passwords: Iterable[str]) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(["Password"])
        for password in passwords:
            writer.writerow([password])
        return buffer.getvalue()

    @staticmethod
    def to_dict(batch: BatchResult) -> dict[str, Any]:
        return {
            "passwords": list(batch.passwords),
            "count": batch.count,
            "generated_at": batch.generated_at.isoformat(),
        }

    def to_json(self, batch: BatchResult) -> str:
        return json.dumps(self.to_dict(batch), indent=2, ensure_ascii=False)

    def render(self, batch: BatchResult, fmt: str) -> str:
        """Render *batch* as *fmt* (``csv`` or ``json``).

        Raises:
            InvalidConfiguration: If *fmt* is not a supported format.
        """
        fmt = fmt.lower()
        if fmt == "csv":
            return self.to_csv(batch.passwords)
        if fmt == "json":
            return self.to_json(batch)
        raise InvalidConfiguration(
            f"unknown export format {fmt!r}; expected one of {', '.join(EXPORT_FORMATS)}"
        )

    def write(self, batch: BatchResult, output_path: Path | str, fmt: str = "csv") -> Path:
        """Write *batch* to *output_path*, creating parent directories.

        Returns:
            Path to the written file.
        """
        content = self.render(batch, fmt)
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8", newline="")
        return output_path
