from __future__ import annotations

from datetime import date, datetime

from pydantic import Field, field_validator

from hms_client.domain.value_objects.enums import LabReportStatus, LabTestCategory
from hms_client.infrastructure.http.schemas.common import ApiModel


def _date_only(value: object) -> object:
    if isinstance(value, str) and value:
        return date.fromisoformat(value[:10])
    return value


class PatientResponse(ApiModel):
    id: str = Field(alias="_id")
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str | None = None
    gender: str | None = None
    date_of_birth: date | None = None

    _parse_dob = field_validator("date_of_birth", mode="before")(_date_only)


class CreatePatientRequest(ApiModel):
    first_name: str
    last_name: str
    email: str
    password: str
    phone: str | None = None
    gender: str | None = None
    date_of_birth: date | None = None


class PersonRefResponse(ApiModel):
    id: str = Field(alias="_id")
    first_name: str = ""
    last_name: str = ""


class LabReportResponse(ApiModel):
    id: str = Field(alias="_id")
    patient: PersonRefResponse
    doctor: PersonRefResponse | None = None
    test_name: str
    test_category: LabTestCategory = LabTestCategory.BLOOD_TEST
    status: LabReportStatus = LabReportStatus.ORDERED
    results: str = ""
    notes: str = ""
    completed_at: datetime | None = None
    created_at: datetime | None = None

    @field_validator("patient", "doctor", mode="before")
    @classmethod
    def _expand_ref(cls, value: object) -> object:
        if isinstance(value, str):
            return {"_id": value}
        return value


class OrderLabTestRequest(ApiModel):
    patient_id: str
    test_name: str
    test_category: LabTestCategory = LabTestCategory.BLOOD_TEST
    notes: str = ""


class UpdateLabReportRequest(ApiModel):
    status: LabReportStatus | None = None
    results: str | None = None
    notes: str | None = None


class MedicineResponse(ApiModel):
    id: str = Field(alias="_id")
    name: str
    category: str = ""
    stock: int = 0
    price: float = 0.0
    expiry_date: datetime | None = None
    supplier: str | None = None


class InventoryAlertsResponse(ApiModel):
    low_stock: list[MedicineResponse] = []
    expiring_soon: list[MedicineResponse] = []
    expired: list[MedicineResponse] = []
