from __future__ import annotations

from types import TracebackType
from typing import Self

import httpx

from hms_client.infrastructure.http.repositories.chat import ChatReaderRepo, ChatWriterRepo
from hms_client.infrastructure.http.repositories.clinical import (
    LabReportReaderRepo,
    LabReportWriterRepo,
    MedicineReaderRepo,
    PatientReaderRepo,
    PatientWriterRepo,
)
from hms_client.infrastructure.http.repositories.notification import (
    NotificationReaderRepo,
    NotificationWriterRepo,
)
from hms_client.infrastructure.http.repositories.search import SearchReaderRepo
from hms_client.infrastructure.http.repositories.user import ProfileReaderRepo


class HttpHospitalGateway:
    """Concrete gateway backed by a single httpx.AsyncClient."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client
        self.chat = ChatReaderRepo(client)
        self.chat_w = ChatWriterRepo(client)
        self.notifications = NotificationReaderRepo(client)
        self.notifications_w = NotificationWriterRepo(client)
        self.patients = PatientReaderRepo(client)
        self.patients_w = PatientWriterRepo(client)
        self.lab_reports = LabReportReaderRepo(client)
        self.lab_reports_w = LabReportWriterRepo(client)
        self.medicines = MedicineReaderRepo(client)
        self.search = SearchReaderRepo(client)
        self.users = ProfileReaderRepo(client)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()
