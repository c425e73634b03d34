from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from hms_client.domain.value_objects.enums import LabReportStatus, LabTestCategory


@dataclass(frozen=True, slots=True)
class PersonRef:
    id: str
    first_name: str = ""
    last_name: str = ""


@dataclass(frozen=True, slots=True)
class LabReport:
    id: str
    patient: PersonRef
    doctor: PersonRef | None
    test_name: str
    test_category: LabTestCategory
    status: LabReportStatus
    results: str
    notes: str
    completed_at: datetime | None
    created_at: datetime | None
