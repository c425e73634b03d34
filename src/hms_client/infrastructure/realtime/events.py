"""Decoding of inbound real-time payloads into domain entities."""
from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from hms_client.application.exceptions import ValidationError
from hms_client.domain.entities.lab_report import LabReport
from hms_client.domain.entities.message import ChatMessage
from hms_client.infrastructure.http.mappers.chat import message_to_entity
from hms_client.infrastructure.http.mappers.clinical import lab_report_to_entity
from hms_client.infrastructure.http.schemas.chat import MessageResponse
from hms_client.infrastructure.http.schemas.clinical import LabReportResponse


def decode_message(data: Any) -> ChatMessage:
    try:
        return message_to_entity(MessageResponse.model_validate(data))
    except PydanticValidationError as exc:
        raise ValidationError(f"Bad receive_message payload: {exc}") from exc


def decode_lab_report(data: Any) -> LabReport:
    try:
        return lab_report_to_entity(LabReportResponse.model_validate(data))
    except PydanticValidationError as exc:
        raise ValidationError(f"Bad lab_report_updated payload: {exc}") from exc
