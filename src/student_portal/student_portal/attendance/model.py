from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from datetime import date

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's mark for one day."""

    id: str
    student_id: str
    date: date
    status: AttendanceStatus


@dataclass(frozen=True)
class AttendanceMark:
    """Write-model for the upsert keyed on (student_id, date)."""

    student_id: str
    date: date
    status: AttendanceStatus

    def to_row(self) -> dict:
        return {"student_id": self.student_id, "date": self.date.isoformat(), "status": self.status.value}


@dataclass(frozen=True)
class DailySummary:
    present: int = 0
    absent: int = 0
    rate: int = 0

    @classmethod
    def from_marks(cls, marks) -> "DailySummary":
        statuses = list(marks.values())
        present = sum(1 for s in statuses if s == AttendanceStatus.PRESENT)
        absent = sum(1 for s in statuses if s == AttendanceStatus.ABSENT)
        total = present + absent
        # Half-up rounding, 12.5 -> 13
        rate = math.floor(present * 100 / total + 0.5) if total > 0 else 0
        return cls(present=present, absent=absent, rate=rate)

    def to_json(self) -> str:
        return json.dumps({"present": self.present, "absent": self.absent, "rate": self.rate})

    @classmethod
    def from_json(cls, text: str) -> "DailySummary":
        data = json.loads(text)
        return cls(present=int(data["present"]), absent=int(data["absent"]), rate=int(data["rate"]))


@dataclass
class AttendanceSheet:
    """State of the attendance panel for one date."""

    date: date
    marks: dict[str, AttendanceStatus] = field(default_factory=dict)
    is_editing: bool = False

    def status_for(self, student_id: str) -> str:
        status = self.marks.get(student_id)
        return status.value if status else ""
