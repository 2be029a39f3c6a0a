"""JSON export of inspection reports."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from core.domain.models import NumberReport
from core.services.inspection import summarize


def reports_payload(reports: Sequence[NumberReport]) -> dict:
    return {
        "reports": [report.model_dump(mode="json") for report in reports],
        "summary": summarize(reports),
    }


def export_reports_json(*, reports: Sequence[NumberReport], output_path: Path) -> Path:
    """Write `reports` to `output_path` as UTF-8 JSON with a stable layout."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(reports_payload(reports), ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
