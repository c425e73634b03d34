from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class Patient:
    id: str
    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    gender: str | None = None
    date_of_birth: date | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True, slots=True)
class NewPatient:
    first_name: str
    last_name: str
    email: str
    password: str
    phone: str | None = None
    gender: str | None = None
    date_of_birth: date | None = None
