from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator

import httpx

from hms_client.application.ports.toast import LoggingToaster, Toaster
from hms_client.application.ports.transport import RealtimeTransport
from hms_client.config import Settings, settings as default_settings
from hms_client.infrastructure.http.client import create_http_client
from hms_client.infrastructure.http.gateway import HttpHospitalGateway
from hms_client.infrastructure.realtime.socketio_transport import SocketIOTransport
from hms_client.services.clinical import (
    InventoryAlertsBoard,
    LabReportBoard,
    PatientDirectory,
)
from hms_client.services.notification_center import NotificationCenter
from hms_client.services.realtime_session import RealtimeSession
from hms_client.services.search import DebouncedSearch

logger = logging.getLogger(__name__)


@dataclass
class HospitalClient:
    """Everything a front-end needs for one logged-in user."""

    settings: Settings
    gateway: HttpHospitalGateway
    session: RealtimeSession

    @property
    def toaster(self) -> Toaster:
        return self.session.toaster

    def notification_center(self) -> NotificationCenter:
        return NotificationCenter(self.gateway, self.session.counters, self.toaster)

    def search(self) -> DebouncedSearch:
        return DebouncedSearch(
            self.gateway.search,
            self.toaster,
            delay=self.settings.SEARCH_DEBOUNCE_SECONDS,
            min_length=self.settings.SEARCH_MIN_QUERY_LENGTH,
        )

    def lab_reports(self) -> LabReportBoard:
        board = LabReportBoard(self.gateway, self.toaster)
        board.bind(self.session)
        return board

    def inventory_alerts(self) -> InventoryAlertsBoard:
        board = InventoryAlertsBoard(self.gateway, self.toaster)
        board.bind(self.session)
        return board

    def patients(self) -> PatientDirectory:
        return PatientDirectory(self.gateway, self.toaster)


@asynccontextmanager
async def connect(
    settings: Settings = default_settings,
    *,
    token: str | None = None,
    http_transport: httpx.AsyncBaseTransport | None = None,
    realtime: RealtimeTransport | None = None,
    toaster: Toaster | None = None,
) -> AsyncIterator[HospitalClient]:
    """Load the profile, open the real-time session, tear both down on exit."""
    gateway = HttpHospitalGateway(
        create_http_client(settings, token, transport=http_transport),
    )
    async with gateway:
        user = await gateway.users.profile()
        logger.info("Signed in as %s (%s)", user.id, user.role)
        session = RealtimeSession(
            gateway,
            realtime or SocketIOTransport(settings),
            user,
            toaster=toaster or LoggingToaster(),
        )
        async with session:
            yield HospitalClient(settings=settings, gateway=gateway, session=session)
