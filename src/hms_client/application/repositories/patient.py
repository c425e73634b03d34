from __future__ import annotations

from typing import Protocol

from hms_client.domain.entities.patient import NewPatient, Patient


class PatientReader(Protocol):
    async def list_patients(self) -> list[Patient]: ...


class PatientWriter(Protocol):
    async def create(self, patient: NewPatient) -> Patient: ...
