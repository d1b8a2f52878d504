from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Department:
    id: str
    code: str
    name: str


@dataclass(frozen=True)
class Year:
    id: str
    label: str
    value: int


@dataclass(frozen=True)
class Semester:
    id: str
    number: int


@dataclass(frozen=True)
class Cohort:
    """The (department, year, semester) triple that scopes the visible roster."""

    department: Department
    year: Year
    semester: Semester

    @property
    def title(self) -> str:
        return f"{self.department.code} - Year {self.year.value} - Sem {self.semester.number}"

    @property
    def route_args(self) -> dict:
        return {"dept": self.department.code, "year": self.year.value, "sem": self.semester.number}

    @property
    def cache_scope(self) -> str:
        return f"{self.department.code}-{self.year.value}-{self.semester.number}"


@dataclass(frozen=True)
class Lookups:
    departments: list[Department]
    years: list[Year]
    semesters: list[Semester]
