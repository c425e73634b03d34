from __future__ import annotations

from typing import Protocol

from hms_client.domain.entities.lab_report import LabReport
from hms_client.domain.value_objects.enums import LabReportStatus, LabTestCategory


class LabReportReader(Protocol):
    async def list_reports(self) -> list[LabReport]: ...


class LabReportWriter(Protocol):
    async def order(
        self,
        patient_id: str,
        test_name: str,
        test_category: LabTestCategory,
        notes: str = "",
    ) -> LabReport: ...

    async def update(
        self,
        report_id: str,
        *,
        status: LabReportStatus | None = None,
        results: str | None = None,
        notes: str | None = None,
    ) -> LabReport: ...
