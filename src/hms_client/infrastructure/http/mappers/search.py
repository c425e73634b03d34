from __future__ import annotations

from hms_client.domain.entities.search import (
    AppointmentHit,
    DoctorHit,
    MedicineHit,
    PatientHit,
    SearchResults,
)
from hms_client.infrastructure.http.schemas.search import SearchResponse


def search_to_entity(schema: SearchResponse) -> SearchResults:
    return SearchResults(
        patients=[
            PatientHit(id=p.id, first_name=p.first_name, last_name=p.last_name, email=p.email)
            for p in schema.patients
        ],
        doctors=[
            DoctorHit(
                id=d.id,
                first_name=d.first_name,
                last_name=d.last_name,
                department=d.doctor_department,
            )
            for d in schema.doctors
        ],
        appointments=[
            AppointmentHit(
                id=a.id,
                reason=a.reason,
                status=a.status,
                appointment_date=a.appointment_date,
                patient_name=(
                    f"{a.patient.first_name} {a.patient.last_name}" if a.patient else ""
                ),
            )
            for a in schema.appointments
        ],
        medicines=[
            MedicineHit(id=m.id, name=m.name, category=m.category, stock=m.stock, price=m.price)
            for m in schema.medicines
        ],
    )
