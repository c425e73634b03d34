from __future__ import annotations

from datetime import datetime

from pydantic import Field

from hms_client.infrastructure.http.schemas.common import ApiModel


class PatientHitResponse(ApiModel):
    id: str = Field(alias="_id")
    first_name: str = ""
    last_name: str = ""
    email: str = ""


class DoctorHitResponse(ApiModel):
    id: str = Field(alias="_id")
    first_name: str = ""
    last_name: str = ""
    doctor_department: str | None = None


class NameRef(ApiModel):
    first_name: str = ""
    last_name: str = ""


class AppointmentHitResponse(ApiModel):
    id: str = Field(alias="_id")
    reason: str = ""
    status: str = ""
    appointment_date: datetime | None = None
    patient: NameRef | None = None


class MedicineHitResponse(ApiModel):
    id: str = Field(alias="_id")
    name: str = ""
    category: str = ""
    stock: int = 0
    price: float = 0.0


class SearchResponse(ApiModel):
    patients: list[PatientHitResponse] = []
    doctors: list[DoctorHitResponse] = []
    appointments: list[AppointmentHitResponse] = []
    medicines: list[MedicineHitResponse] = []
