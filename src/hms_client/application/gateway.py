from __future__ import annotations

from typing import Protocol

from hms_client.application.repositories.chat import ChatReader, ChatWriter
from hms_client.application.repositories.lab_report import (
    LabReportReader,
    LabReportWriter,
)
from hms_client.application.repositories.medicine import MedicineReader
from hms_client.application.repositories.notification import (
    NotificationReader,
    NotificationWriter,
)
from hms_client.application.repositories.patient import PatientReader, PatientWriter
from hms_client.application.repositories.search import SearchReader
from hms_client.application.repositories.user import ProfileReader


class HospitalGateway(Protocol):
    chat: ChatReader
    chat_w: ChatWriter
    notifications: NotificationReader
    notifications_w: NotificationWriter
    patients: PatientReader
    patients_w: PatientWriter
    lab_reports: LabReportReader
    lab_reports_w: LabReportWriter
    medicines: MedicineReader
    search: SearchReader
    users: ProfileReader

    async def aclose(self) -> None: ...
