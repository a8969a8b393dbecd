"""Writes a `WalkReport` to disk for `walk --export-json`."""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import WalkReport


def export_report_json(*, report: WalkReport, output_path: Path) -> Path:
    """Dump the report as indented UTF-8 JSON, keys sorted so diffs between runs stay small."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(report.model_dump(mode="json"), ensure_ascii=False, indent=2, sort_keys=True)
    output_path.write_text(text + "\n", encoding="utf-8")
    return output_path
