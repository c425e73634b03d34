from __future__ import annotations

from hms_client.domain.entities.lab_report import LabReport, PersonRef
from hms_client.domain.entities.medicine import InventoryAlerts, Medicine
from hms_client.domain.entities.patient import NewPatient, Patient
from hms_client.infrastructure.http.schemas.clinical import (
    CreatePatientRequest,
    InventoryAlertsResponse,
    LabReportResponse,
    MedicineResponse,
    PatientResponse,
    PersonRefResponse,
)


def patient_to_entity(schema: PatientResponse) -> Patient:
    return Patient(
        id=schema.id,
        first_name=schema.first_name,
        last_name=schema.last_name,
        email=schema.email,
        phone=schema.phone,
        gender=schema.gender,
        date_of_birth=schema.date_of_birth,
    )


def new_patient_to_request(entity: NewPatient) -> CreatePatientRequest:
    return CreatePatientRequest(
        first_name=entity.first_name,
        last_name=entity.last_name,
        email=entity.email,
        password=entity.password,
        phone=entity.phone,
        gender=entity.gender,
        date_of_birth=entity.date_of_birth,
    )


def _person(schema: PersonRefResponse) -> PersonRef:
    return PersonRef(id=schema.id, first_name=schema.first_name, last_name=schema.last_name)


def lab_report_to_entity(schema: LabReportResponse) -> LabReport:
    return LabReport(
        id=schema.id,
        patient=_person(schema.patient),
        doctor=_person(schema.doctor) if schema.doctor else None,
        test_name=schema.test_name,
        test_category=schema.test_category,
        status=schema.status,
        results=schema.results,
        notes=schema.notes,
        completed_at=schema.completed_at,
        created_at=schema.created_at,
    )


def medicine_to_entity(schema: MedicineResponse) -> Medicine:
    return Medicine(
        id=schema.id,
        name=schema.name,
        category=schema.category,
        stock=schema.stock,
        price=schema.price,
        expiry_date=schema.expiry_date,
        supplier=schema.supplier,
    )


def alerts_to_entity(schema: InventoryAlertsResponse) -> InventoryAlerts:
    return InventoryAlerts(
        low_stock=[medicine_to_entity(m) for m in schema.low_stock],
        expiring_soon=[medicine_to_entity(m) for m in schema.expiring_soon],
        expired=[medicine_to_entity(m) for m in schema.expired],
    )
