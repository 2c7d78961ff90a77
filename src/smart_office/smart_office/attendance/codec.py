"""One attendance event <-> one CSV line.

Columns: employee_id, employee_name, method, direction flag ("1" = check-in),
ISO-8601 local timestamp with second precision.

Decoding splits naively into at most five fields, so a quoted name that
contains a comma is not recovered: the comma shifts the remaining columns and
the line fails to decode. Quoted names without commas are un-quoted.
"""

from __future__ import annotations

import csv
import io
from datetime import datetime
from typing import Optional, Union

from ..core.enums import Direction
from ..core.failures import ParseFailure
from .model import AttendanceEvent

FIELD_COUNT = 5
TIMESTAMP_FORMATS = ("%Y-%m-%dT%H:%M:%S", "%Y-%m-%dT%H:%M:%S.%f")


def encode(event: AttendanceEvent) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(
        [
            event.employee_id,
            event.employee_name,
            event.method,
            event.direction.csv_flag,
            event.timestamp.isoformat(timespec="seconds"),
        ]
    )
    return buf.getvalue().removesuffix("\n")


def decode(line: str) -> Union[AttendanceEvent, ParseFailure]:
    parts = line.split(",", FIELD_COUNT - 1)
    if len(parts) < FIELD_COUNT:
        return ParseFailure(line=line, reason=f"expected {FIELD_COUNT} fields, got {len(parts)}")

    try:
        employee_id = int(parts[0].strip())
    except ValueError:
        return ParseFailure(line=line, reason=f"bad employee id: {parts[0]!r}")

    timestamp = _parse_local_timestamp(parts[4].strip())
    if timestamp is None:
        return ParseFailure(line=line, reason=f"bad timestamp: {parts[4]!r}")

    return AttendanceEvent(
        employee_id=employee_id,
        employee_name=_unquote(parts[1]),
        method=parts[2].strip(),
        direction=Direction.from_csv_flag(parts[3].strip()),
        timestamp=timestamp,
    )


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        value = value[1:-1].replace('""', '"')
    return value


def _parse_local_timestamp(value: str) -> Optional[datetime]:
    """Local date-time only: no offset, no date-only values."""
    for fmt in TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(value, fmt).replace(microsecond=0)
        except ValueError:
            continue
    return None
