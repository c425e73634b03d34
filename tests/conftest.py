"""Shared test fixtures."""
from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

import pytest

from hms_client.application.dto.session import SessionUser
from hms_client.application.exceptions import AppError
from hms_client.application.subscription import Subscription
from hms_client.domain.entities.counterpart import Counterpart
from hms_client.domain.entities.lab_report import LabReport, PersonRef
from hms_client.domain.entities.medicine import InventoryAlerts, Medicine
from hms_client.domain.entities.message import ChatMessage
from hms_client.domain.entities.notification import Notification, UnreadCounts
from hms_client.domain.entities.patient import NewPatient, Patient
from hms_client.domain.entities.search import SearchResults
from hms_client.domain.value_objects.enums import (
    LabReportStatus,
    LabTestCategory,
    NotificationType,
    UserRole,
)
from hms_client.services.realtime_session import RealtimeSession

SELF_ID = "u-self"


@pytest.fixture
def user() -> SessionUser:
    return SessionUser(id=SELF_ID, role=UserRole.DOCTOR, first_name="Ann", last_name="Lee")


def make_counterpart(
    counterpart_id: str,
    *,
    first_name: str = "Bob",
    last_name: str = "Stone",
    unread: int = 0,
) -> Counterpart:
    return Counterpart(
        id=counterpart_id,
        first_name=first_name,
        last_name=last_name,
        role=UserRole.PATIENT,
        unread_count=unread,
    )


_message_seq = 0


def make_message(
    *,
    sender: str,
    receiver: str = SELF_ID,
    body: str = "hello",
    message_id: str | None = None,
) -> ChatMessage:
    global _message_seq
    _message_seq += 1
    return ChatMessage(
        id=message_id or f"m-{_message_seq}",
        sender_id=sender,
        receiver_id=receiver,
        body=body,
        read=False,
        created_at=datetime.now(timezone.utc),
    )


def message_payload(message: ChatMessage) -> dict[str, Any]:
    """Wire form of a message as pushed by the real-time server."""
    return {
        "_id": message.id,
        "sender": message.sender_id,
        "receiver": message.receiver_id,
        "message": message.body,
        "read": message.read,
        "createdAt": message.created_at.isoformat(),
    }


def make_notification(
    notification_id: str,
    *,
    is_read: bool = False,
    created_at: datetime | None = None,
) -> Notification:
    return Notification(
        id=notification_id,
        type=NotificationType.LAB_REPORT,
        title="Lab Results Ready",
        message="Your CBC results are ready",
        is_read=is_read,
        link="/lab-reports",
        created_at=created_at or datetime.now(timezone.utc),
    )


def make_lab_report(
    report_id: str,
    *,
    status: LabReportStatus = LabReportStatus.ORDERED,
    results: str = "",
) -> LabReport:
    return LabReport(
        id=report_id,
        patient=PersonRef(id="p-1", first_name="Bob", last_name="Stone"),
        doctor=PersonRef(id=SELF_ID, first_name="Ann", last_name="Lee"),
        test_name="CBC",
        test_category=LabTestCategory.BLOOD_TEST,
        status=status,
        results=results,
        notes="",
        completed_at=None,
        created_at=datetime.now(timezone.utc),
    )


@dataclass
class FakeChatReader:
    counterparts: list[Counterpart] = field(default_factory=list)
    transcripts: dict[str, list[ChatMessage]] = field(default_factory=dict)
    gate: asyncio.Event | None = None
    gates: dict[str, asyncio.Event] = field(default_factory=dict)
    fail: AppError | None = None

    async def list_counterparts(self) -> list[Counterpart]:
        if self.fail:
            raise self.fail
        return list(self.counterparts)

    async def list_messages(self, counterpart_id: str) -> list[ChatMessage]:
        gate = self.gates.get(counterpart_id) or self.gate
        if gate is not None:
            await gate.wait()
        if self.fail:
            raise self.fail
        return list(self.transcripts.get(counterpart_id, []))


@dataclass
class FakeChatWriter:
    sent: list[tuple[str, str]] = field(default_factory=list)
    read_receipts: list[str] = field(default_factory=list)
    fail: AppError | None = None
    _seq: int = 0

    async def send(self, receiver_id: str, body: str) -> ChatMessage:
        if self.fail:
            raise self.fail
        self._seq += 1
        self.sent.append((receiver_id, body))
        return make_message(
            sender=SELF_ID, receiver=receiver_id, body=body, message_id=f"sent-{self._seq}",
        )

    async def mark_read(self, sender_id: str) -> None:
        self.read_receipts.append(sender_id)


@dataclass
class FakeNotificationReader:
    items: list[Notification] = field(default_factory=list)
    counts: UnreadCounts = field(default_factory=UnreadCounts)
    count_calls: int = 0
    fail: AppError | None = None

    async def list_notifications(self) -> list[Notification]:
        if self.fail:
            raise self.fail
        return list(self.items)

    async def unread_counts(self) -> UnreadCounts:
        self.count_calls += 1
        if self.fail:
            raise self.fail
        return self.counts


@dataclass
class FakeNotificationWriter:
    calls: list[tuple[str, str | None]] = field(default_factory=list)
    fail: AppError | None = None

    async def mark_read(self, notification_id: str) -> None:
        self._record("mark_read", notification_id)

    async def mark_all_read(self) -> None:
        self._record("mark_all_read", None)

    async def delete(self, notification_id: str) -> None:
        self._record("delete", notification_id)

    async def clear(self) -> None:
        self._record("clear", None)

    def _record(self, name: str, arg: str | None) -> None:
        if self.fail:
            raise self.fail
        self.calls.append((name, arg))


@dataclass
class FakePatients:
    patients: list[Patient] = field(default_factory=list)
    fail: AppError | None = None

    async def list_patients(self) -> list[Patient]:
        return list(self.patients)

    async def create(self, patient: NewPatient) -> Patient:
        if self.fail:
            raise self.fail
        created = Patient(
            id=f"p-{len(self.patients) + 1}",
            first_name=patient.first_name,
            last_name=patient.last_name,
            email=patient.email,
        )
        self.patients.append(created)
        return created


@dataclass
class FakeLabReports:
    reports: list[LabReport] = field(default_factory=list)
    ordered: list[tuple[str, str, LabTestCategory, str]] = field(default_factory=list)
    fail: AppError | None = None

    async def list_reports(self) -> list[LabReport]:
        if self.fail:
            raise self.fail
        return list(self.reports)

    async def order(
        self,
        patient_id: str,
        test_name: str,
        test_category: LabTestCategory,
        notes: str = "",
    ) -> LabReport:
        if self.fail:
            raise self.fail
        self.ordered.append((patient_id, test_name, test_category, notes))
        return make_lab_report(f"lr-{len(self.ordered)}")

    async def update(self, report_id: str, *, status=None, results=None, notes=None) -> LabReport:
        if self.fail:
            raise self.fail
        return make_lab_report(report_id, status=status or LabReportStatus.ORDERED, results=results or "")


@dataclass
class FakeMedicines:
    alerts_result: InventoryAlerts = field(default_factory=InventoryAlerts)
    calls: int = 0

    async def alerts(self) -> InventoryAlerts:
        self.calls += 1
        return self.alerts_result


@dataclass
class FakeSearchReader:
    queries: list[str] = field(default_factory=list)
    results: dict[str, SearchResults] = field(default_factory=dict)
    gates: dict[str, asyncio.Event] = field(default_factory=dict)
    fail: AppError | None = None

    async def search(self, query: str) -> SearchResults:
        self.queries.append(query)
        gate = self.gates.get(query)
        if gate is not None:
            await gate.wait()
        if self.fail:
            raise self.fail
        return self.results.get(query, SearchResults())


@dataclass
class FakeProfile:
    user: SessionUser | None = None

    async def profile(self) -> SessionUser:
        assert self.user is not None
        return self.user


@dataclass
class FakeGateway:
    """In-memory gateway for unit tests."""
    chat: FakeChatReader = field(default_factory=FakeChatReader)
    chat_w: FakeChatWriter = field(default_factory=FakeChatWriter)
    notifications: FakeNotificationReader = field(default_factory=FakeNotificationReader)
    notifications_w: FakeNotificationWriter = field(default_factory=FakeNotificationWriter)
    patients: FakePatients = field(default_factory=FakePatients)
    lab_reports: FakeLabReports = field(default_factory=FakeLabReports)
    medicines: FakeMedicines = field(default_factory=FakeMedicines)
    search: FakeSearchReader = field(default_factory=FakeSearchReader)
    users: FakeProfile = field(default_factory=FakeProfile)
    closed: bool = False

    @property
    def patients_w(self) -> FakePatients:
        return self.patients

    @property
    def lab_reports_w(self) -> FakeLabReports:
        return self.lab_reports

    async def aclose(self) -> None:
        self.closed = True


@dataclass
class FakeTransport:
    """Transport double; `deliver` plays the server pushing an event."""
    handlers: dict[str, list[Any]] = field(default_factory=dict)
    connect_handlers: list[Any] = field(default_factory=list)
    emitted: list[tuple[str, Any]] = field(default_factory=list)
    connected: bool = False
    connects: int = 0
    closes: int = 0
    fail_connect: AppError | None = None

    async def connect(self) -> None:
        if self.fail_connect:
            raise self.fail_connect
        self.connected = True
        self.connects += 1
        for handler in list(self.connect_handlers):
            await handler()

    async def reconnect(self) -> None:
        self.connected = False
        await self.connect()

    async def close(self) -> None:
        self.connected = False
        self.closes += 1

    async def emit(self, event: str, data: Any = None) -> None:
        self.emitted.append((event, data))

    def on(self, event: str, handler: Any) -> Subscription:
        handlers = self.handlers.setdefault(event, [])
        handlers.append(handler)
        return Subscription(lambda: handlers.remove(handler))

    def on_connect(self, handler: Any) -> Subscription:
        self.connect_handlers.append(handler)
        return Subscription(lambda: self.connect_handlers.remove(handler))

    def handler_count(self, event: str) -> int:
        return len(self.handlers.get(event, []))

    async def deliver(self, event: str, data: Any = None) -> None:
        for handler in list(self.handlers.get(event, [])):
            await handler(data)


@dataclass
class FakeToaster:
    successes: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def success(self, text: str) -> None:
        self.successes.append(text)

    def error(self, text: str) -> None:
        self.errors.append(text)


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def toaster() -> FakeToaster:
    return FakeToaster()


@pytest.fixture
def session(gateway, transport, user, toaster) -> RealtimeSession:
    return RealtimeSession(gateway, transport, user, toaster=toaster)


def make_medicine(medicine_id: str, *, stock: int = 3) -> Medicine:
    return Medicine(id=medicine_id, name="Amoxicillin", category="Antibiotic", stock=stock, price=120.0)
