"""Healthcare records demo: patients, prescriptions, and a per-patient index."""

from __future__ import annotations

from datetime import datetime, timedelta

import click

from recordkeeper.domain.exceptions import NotFoundError
from recordkeeper.domain.models.healthcare import Patient, Prescription
from recordkeeper.domain.services.healthcare import PrescriptionService
from recordkeeper.infrastructure.persistence.memory import InMemoryRepository

from .output import OutputSink


class HealthcareApp:
    def __init__(self, echo: OutputSink = click.echo, now: datetime | None = None) -> None:
        self.patients: InMemoryRepository[int, Patient] = InMemoryRepository(Patient, "patient records")
        self.prescriptions: InMemoryRepository[int, Prescription] = InMemoryRepository(
            Prescription, "prescription records"
        )
        self._prescription_map: dict[int, list[Prescription]] = {}
        self._service = PrescriptionService()
        self._echo = echo
        self._now = now or datetime.now()

    def seed_data(self) -> None:
        self.patients.add(Patient(id=1, name="John Smith", age=45, gender="Male"))
        self.patients.add(Patient(id=2, name="Sarah Johnson", age=32, gender="Female"))
        self.patients.add(Patient(id=3, name="Michael Brown", age=67, gender="Male"))

        for prescription_id, patient_id, medication, days_ago in (
            (101, 1, "Lisinopril 10mg", 30),
            (102, 1, "Metformin 500mg", 15),
            (103, 2, "Ibuprofen 400mg", 7),
            (104, 2, "Vitamin D3", 3),
            (105, 3, "Atorvastatin 20mg", 20),
        ):
            self.prescriptions.add(
                Prescription(
                    id=prescription_id,
                    patient_id=patient_id,
                    medication_name=medication,
                    date_issued=self._now - timedelta(days=days_ago),
                )
            )

    def build_prescription_map(self) -> None:
        self._prescription_map = self._service.group_by_patient(self.prescriptions.list_all())

    def prescriptions_for(self, patient_id: int) -> list[Prescription]:
        return list(self._prescription_map.get(patient_id, []))

    def print_all_patients(self) -> None:
        self._echo("All Patients:")
        for patient in self.patients.list_all():
            self._echo(
                f"ID: {patient.id}, Name: {patient.name}, Age: {patient.age}, Gender: {patient.gender}"
            )

    def print_prescriptions_for_patient(self, patient_id: int) -> None:
        try:
            patient = self.patients.get(patient_id)
        except NotFoundError:
            self._echo(f"\nNo patient with ID {patient_id}.")
            return
        self._echo(f"\nPrescriptions for {patient.name}:")
        for prescription in self.prescriptions_for(patient_id):
            self._echo(f"- {prescription.medication_name} (Issued: {prescription.date_issued:%Y-%m-%d})")


def run_healthcare_demo(echo: OutputSink = click.echo) -> HealthcareApp:
    app = HealthcareApp(echo=echo)
    app.seed_data()
    app.build_prescription_map()
    app.print_all_patients()
    app.print_prescriptions_for_patient(1)
    return app
