"""Lab reports, inventory alerts and the patient directory."""
from __future__ import annotations

import logging
from typing import Any

from hms_client.application.exceptions import AppError, ValidationError
from hms_client.application.gateway import HospitalGateway
from hms_client.application.ports.toast import Toaster
from hms_client.application.ports.transport import EventSource
from hms_client.application.subscription import Subscription
from hms_client.domain.entities.lab_report import LabReport
from hms_client.domain.entities.medicine import InventoryAlerts
from hms_client.domain.entities.patient import NewPatient, Patient
from hms_client.domain.value_objects.enums import (
    LabReportStatus,
    LabTestCategory,
    RealtimeEvent,
)
from hms_client.infrastructure.realtime.events import decode_lab_report
from hms_client.services._observable import Observable

logger = logging.getLogger(__name__)


class _Board(Observable):
    def __init__(self, gateway: HospitalGateway, toaster: Toaster) -> None:
        super().__init__()
        self._gateway = gateway
        self._toaster = toaster


class _LiveBoard(_Board):
    """A board that follows real-time events once bound to a session."""

    def __init__(self, gateway: HospitalGateway, toaster: Toaster) -> None:
        super().__init__(gateway, toaster)
        self._subscription: Subscription | None = None

    def bind(self, source: EventSource) -> Subscription:
        self.unbind()
        self._subscription = self._subscribe(source)
        return self._subscription

    def unbind(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    def _subscribe(self, source: EventSource) -> Subscription:
        raise NotImplementedError


class LabReportBoard(_LiveBoard):
    def __init__(self, gateway: HospitalGateway, toaster: Toaster) -> None:
        super().__init__(gateway, toaster)
        self._reports: list[LabReport] = []

    @property
    def reports(self) -> list[LabReport]:
        return list(self._reports)

    async def load(self) -> bool:
        try:
            self._reports = await self._gateway.lab_reports.list_reports()
        except AppError as exc:
            logger.warning("Error fetching lab reports: %s", exc.detail)
            self._toaster.error("Failed to fetch lab reports")
            return False
        self._notify()
        return True

    async def order(
        self,
        patient_id: str,
        test_name: str,
        test_category: LabTestCategory = LabTestCategory.BLOOD_TEST,
        notes: str = "",
    ) -> LabReport | None:
        if not patient_id or not test_name.strip():
            self._toaster.error("Patient and Test Name are required")
            return None
        try:
            report = await self._gateway.lab_reports_w.order(
                patient_id, test_name.strip(), test_category, notes,
            )
        except AppError as exc:
            logger.warning("Error ordering lab test: %s", exc.detail)
            self._toaster.error(exc.detail or "Failed to order test")
            return None
        self._toaster.success("Lab test ordered!")
        self.apply(report)
        return report

    async def update(
        self,
        report_id: str,
        *,
        status: LabReportStatus | None = None,
        results: str | None = None,
        notes: str | None = None,
    ) -> LabReport | None:
        try:
            report = await self._gateway.lab_reports_w.update(
                report_id, status=status, results=results, notes=notes,
            )
        except AppError as exc:
            logger.warning("Error updating lab report %s: %s", report_id, exc.detail)
            self._toaster.error("Failed to update")
            return None
        self._toaster.success("Lab report updated!")
        self.apply(report)
        return report

    def apply(self, report: LabReport) -> None:
        """Replace the report in place, or prepend it if unknown."""
        for index, existing in enumerate(self._reports):
            if existing.id == report.id:
                self._reports[index] = report
                break
        else:
            self._reports.insert(0, report)
        self._notify()

    def _subscribe(self, source: EventSource) -> Subscription:
        return source.subscribe(RealtimeEvent.LAB_REPORT_UPDATED, self._on_report_updated)

    async def _on_report_updated(self, data: Any) -> None:
        try:
            report = decode_lab_report(data)
        except ValidationError as exc:
            logger.warning("%s", exc.detail)
            return
        self.apply(report)


class InventoryAlertsBoard(_LiveBoard):
    def __init__(self, gateway: HospitalGateway, toaster: Toaster) -> None:
        super().__init__(gateway, toaster)
        self._alerts = InventoryAlerts()

    @property
    def alerts(self) -> InventoryAlerts:
        return self._alerts

    async def load(self) -> bool:
        try:
            self._alerts = await self._gateway.medicines.alerts()
        except AppError as exc:
            logger.warning("Error fetching inventory alerts: %s", exc.detail)
            self._toaster.error("Failed to fetch alerts")
            return False
        self._notify()
        return True

    def _subscribe(self, source: EventSource) -> Subscription:
        return source.subscribe(RealtimeEvent.MEDICINE_UPDATED, self._on_medicine_updated)

    async def _on_medicine_updated(self, _data: Any) -> None:
        await self.load()


class PatientDirectory(_Board):
    def __init__(self, gateway: HospitalGateway, toaster: Toaster) -> None:
        super().__init__(gateway, toaster)
        self._patients: list[Patient] = []

    @property
    def patients(self) -> list[Patient]:
        return list(self._patients)

    async def load(self) -> bool:
        try:
            self._patients = await self._gateway.patients.list_patients()
        except AppError as exc:
            logger.warning("Error fetching patients: %s", exc.detail)
            self._toaster.error("Failed to fetch patients")
            return False
        self._notify()
        return True

    async def register(self, patient: NewPatient) -> Patient | None:
        try:
            created = await self._gateway.patients_w.create(patient)
        except AppError as exc:
            logger.warning("Error creating patient: %s", exc.detail)
            self._toaster.error(exc.detail or "Failed to add patient")
            return None
        self._toaster.success("Patient added successfully")
        await self.load()
        return created
