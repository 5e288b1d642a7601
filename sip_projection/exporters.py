"""CSV serialization of projection output.

Values are written exactly as the engine produced them; nothing is rounded or
recomputed on the way out.
"""

from __future__ import annotations

import csv
import io
from typing import Sequence, Type

from pydantic import BaseModel

from sip_projection.schemas.projection import MonthlyRecord, YearlySummary


def _to_csv(model: Type[BaseModel], rows: Sequence[BaseModel]) -> str:
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=list(model.model_fields), lineterminator="\n")
    writer.writeheader()
    for row in rows:
        writer.writerow(row.model_dump())
    return buffer.getvalue()


def export_monthly(records: Sequence[MonthlyRecord]) -> tuple[str, bytes]:
    return "projection_monthly.csv", _to_csv(MonthlyRecord, records).encode()


def export_yearly(summaries: Sequence[YearlySummary]) -> tuple[str, bytes]:
    return "projection_yearly.csv", _to_csv(YearlySummary, summaries).encode()
