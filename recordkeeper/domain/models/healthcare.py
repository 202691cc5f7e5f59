"""Patient and prescription domain models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Patient(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    age: int = Field(ge=0)
    gender: str

    @property
    def key(self) -> int:
        return self.id


class Prescription(BaseModel):
    """A medication issued to a patient.

    patient_id is a plain reference; it is not checked against the patient
    repository when the prescription is stored.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    patient_id: int
    medication_name: str
    date_issued: datetime

    @property
    def key(self) -> int:
        return self.id
