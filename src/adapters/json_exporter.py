"""Exportación JSON de resultados batch.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- Las senhas se exportan sin el texto original (`ValidationOutcome.redacted`).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.services.batch_pipeline import BatchResult


def batch_payload(result: BatchResult) -> dict[str, Any]:
    entries: list[dict[str, Any]] = []
    for item, outcome in zip(result.items, result.outcomes):
        entry = outcome.redacted().model_dump(mode="json")
        entry["line"] = item.line_no
        entries.append(entry)
    return {
        "total": len(result.outcomes),
        "valid": result.valid_count,
        "invalid": result.invalid_count,
        "failures_by_kind": {k.value: v for k, v in sorted(result.failures_by_kind.items())},
        "results": entries,
    }


def export_batch_json(*, result: BatchResult, output_path: Path) -> Path:
    """Exporta `BatchResult` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(batch_payload(result), ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
