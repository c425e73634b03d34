from __future__ import annotations

from hms_client.domain.entities.lab_report import LabReport
from hms_client.domain.entities.medicine import InventoryAlerts
from hms_client.domain.entities.patient import NewPatient, Patient
from hms_client.domain.value_objects.enums import LabReportStatus, LabTestCategory
from hms_client.infrastructure.http.mappers.clinical import (
    alerts_to_entity,
    lab_report_to_entity,
    new_patient_to_request,
    patient_to_entity,
)
from hms_client.infrastructure.http.repositories._base import ApiRepo
from hms_client.infrastructure.http.schemas.clinical import (
    InventoryAlertsResponse,
    LabReportResponse,
    OrderLabTestRequest,
    PatientResponse,
    UpdateLabReportRequest,
)


class PatientReaderRepo(ApiRepo):
    async def list_patients(self) -> list[Patient]:
        data = await self._request("GET", "/patients")
        return [patient_to_entity(s) for s in self._parse_list(PatientResponse, data)]


class PatientWriterRepo(ApiRepo):
    async def create(self, patient: NewPatient) -> Patient:
        body = new_patient_to_request(patient).model_dump(by_alias=True, exclude_none=True, mode="json")
        data = await self._request("POST", "/patients", json=body)
        return patient_to_entity(self._parse(PatientResponse, data))


class LabReportReaderRepo(ApiRepo):
    async def list_reports(self) -> list[LabReport]:
        data = await self._request("GET", "/lab-reports")
        return [lab_report_to_entity(s) for s in self._parse_list(LabReportResponse, data)]


class LabReportWriterRepo(ApiRepo):
    async def order(
        self,
        patient_id: str,
        test_name: str,
        test_category: LabTestCategory,
        notes: str = "",
    ) -> LabReport:
        body = OrderLabTestRequest(
            patient_id=patient_id,
            test_name=test_name,
            test_category=test_category,
            notes=notes,
        )
        data = await self._request("POST", "/lab-reports", json=body.model_dump(by_alias=True, mode="json"))
        return lab_report_to_entity(self._parse(LabReportResponse, data))

    async def update(
        self,
        report_id: str,
        *,
        status: LabReportStatus | None = None,
        results: str | None = None,
        notes: str | None = None,
    ) -> LabReport:
        body = UpdateLabReportRequest(status=status, results=results, notes=notes)
        data = await self._request(
            "PUT",
            f"/lab-reports/{report_id}",
            json=body.model_dump(by_alias=True, exclude_none=True, mode="json"),
        )
        return lab_report_to_entity(self._parse(LabReportResponse, data))


class MedicineReaderRepo(ApiRepo):
    async def alerts(self) -> InventoryAlerts:
        data = await self._request("GET", "/medicines/alerts")
        return alerts_to_entity(self._parse(InventoryAlertsResponse, data or {}))
