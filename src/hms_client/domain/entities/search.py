from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True, slots=True)
class PatientHit:
    id: str
    first_name: str
    last_name: str
    email: str = ""

    @property
    def title(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def summary(self) -> str:
        return self.email


@dataclass(frozen=True, slots=True)
class DoctorHit:
    id: str
    first_name: str
    last_name: str
    department: str | None = None

    @property
    def title(self) -> str:
        return f"Dr. {self.first_name} {self.last_name}"

    @property
    def summary(self) -> str:
        return self.department or "General"


@dataclass(frozen=True, slots=True)
class AppointmentHit:
    id: str
    reason: str
    status: str
    appointment_date: datetime | None = None
    patient_name: str = ""

    @property
    def title(self) -> str:
        return self.reason

    @property
    def summary(self) -> str:
        day = self.appointment_date.date().isoformat() if self.appointment_date else ""
        return f"{self.patient_name} • {day} • {self.status}"


@dataclass(frozen=True, slots=True)
class MedicineHit:
    id: str
    name: str
    category: str
    stock: int
    price: float

    @property
    def title(self) -> str:
        return self.name

    @property
    def summary(self) -> str:
        return f"{self.category} • Stock: {self.stock} • ₹{self.price:g}"


@dataclass(frozen=True, slots=True)
class SearchResults:
    patients: list[PatientHit] = field(default_factory=list)
    doctors: list[DoctorHit] = field(default_factory=list)
    appointments: list[AppointmentHit] = field(default_factory=list)
    medicines: list[MedicineHit] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.patients) + len(self.doctors) + len(self.appointments) + len(self.medicines)

    def categories(self) -> dict[str, list]:
        """Non-empty categories in display order."""
        ordered = {
            "patients": self.patients,
            "doctors": self.doctors,
            "appointments": self.appointments,
            "medicines": self.medicines,
        }
        return {name: hits for name, hits in ordered.items() if hits}
