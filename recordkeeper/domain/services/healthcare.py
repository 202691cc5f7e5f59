"""Prescription grouping service."""

from __future__ import annotations

from collections.abc import Iterable

from recordkeeper.domain.models.healthcare import Prescription


class PrescriptionService:
    def group_by_patient(self, prescriptions: Iterable[Prescription]) -> dict[int, list[Prescription]]:
        """Map each patient_id to its prescriptions, keeping input order within a patient."""
        grouped: dict[int, list[Prescription]] = {}
        for prescription in prescriptions:
            grouped.setdefault(prescription.patient_id, []).append(prescription)
        return grouped
