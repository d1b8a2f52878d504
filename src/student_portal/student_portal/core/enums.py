from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role stored on a user profile."""

    ADMIN = "admin"
    TEACHER = "teacher"


class AttendanceStatus(str, Enum):
    """Daily attendance mark as stored in the attendance table."""

    PRESENT = "present"
    ABSENT = "absent"

    @property
    def label(self) -> str:
        return self.value.capitalize()
