from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..cohorts.model import Department, Semester, Year
from ..core.constants import ADDRESS_PREVIEW_LENGTH


@dataclass(frozen=True)
class Student:
    """Domain entity: one student on a cohort roster."""

    id: str
    reg_no: str
    name: str
    department_id: str
    year_id: str
    semester_id: str
    blood_group: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    department: Optional[Department] = None
    year: Optional[Year] = None
    semester: Optional[Semester] = None

    @property
    def short_address(self) -> Optional[str]:
        if not self.address:
            return None
        if len(self.address) > ADDRESS_PREVIEW_LENGTH:
            return f"{self.address[:ADDRESS_PREVIEW_LENGTH]}..."
        return self.address


@dataclass(frozen=True)
class StudentDraft:
    """Write-model for insert/update (what the student form submits)."""

    reg_no: str
    name: str
    department_id: str
    year_id: str
    semester_id: str
    blood_group: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None

    def to_row(self) -> dict:
        return {
            "reg_no": self.reg_no,
            "name": self.name,
            "department_id": self.department_id,
            "year_id": self.year_id,
            "semester_id": self.semester_id,
            "blood_group": self.blood_group,
            "phone": self.phone,
            "email": self.email,
            "address": self.address,
        }
