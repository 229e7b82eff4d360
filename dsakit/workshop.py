"""Employee records and removal of duplicates by id."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class Employee:
    """An employee identified by id."""

    first_name: str
    last_name: str
    id: int

    def __str__(self) -> str:
        return f"Employee{{ firstName={self.first_name}, lastName={self.last_name}, Id={self.id}}}"


def remove_duplicates(employees: Iterable[Employee]) -> list[Employee]:
    """Keep the first employee for each id, preserving order."""
    seen: set[int] = set()
    unique: list[Employee] = []
    for employee in employees:
        if employee.id not in seen:
            seen.add(employee.id)
            unique.append(employee)
    return unique