from __future__ import annotations

from enum import StrEnum


class UserRole(StrEnum):
    ADMIN = "Admin"
    DOCTOR = "Doctor"
    RECEPTIONIST = "Receptionist"
    PHARMACIST = "Pharmacist"
    PATIENT = "Patient"


class CounterKind(StrEnum):
    MESSAGE = "message"
    NOTIFICATION = "notification"


class NotificationType(StrEnum):
    APPOINTMENT = "appointment"
    LAB_REPORT = "lab_report"
    PRESCRIPTION = "prescription"
    BILLING = "billing"
    GENERAL = "general"
    BED = "bed"
    SYSTEM = "system"


class NotificationFilter(StrEnum):
    ALL = "all"
    UNREAD = "unread"
    READ = "read"


class LabReportStatus(StrEnum):
    ORDERED = "Ordered"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class LabTestCategory(StrEnum):
    BLOOD_TEST = "Blood Test"
    URINE_TEST = "Urine Test"
    X_RAY = "X-Ray"
    MRI = "MRI"
    CT_SCAN = "CT Scan"
    ULTRASOUND = "Ultrasound"
    ECG = "ECG"
    OTHER = "Other"


class RealtimeEvent(StrEnum):
    RECEIVE_MESSAGE = "receive_message"
    NEW_NOTIFICATION = "new_notification"
    MEDICINE_UPDATED = "medicine_updated"
    LAB_REPORT_UPDATED = "lab_report_updated"
    JOIN_ROOM = "join_room"
