"""
Domain models for recordkeeper.

Every record is a frozen Pydantic model with an integer `id`. The same models
drive validation when records are restored from a JSON file and serialization
when they are saved, so field names here are the field names on disk.
"""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from recordkeeper.domain.grades import grade_for

_FROZEN = ConfigDict(frozen=True, populate_by_name=True)


@runtime_checkable
class Identified(Protocol):
    """Anything carrying an integer identifier."""

    @property
    def id(self) -> int: ...


class Transaction(BaseModel):
    """A single debit against an account."""

    id: int = Field(..., description="Transaction identifier.")
    date: datetime = Field(..., description="When the transaction happened.")
    amount: Decimal = Field(..., description="Amount debited.")
    category: str = Field(..., description="Spending category, e.g. Groceries.")

    model_config = _FROZEN


class Patient(BaseModel):
    id: int = Field(..., description="Patient identifier.")
    name: str
    age: int
    gender: str

    model_config = _FROZEN


class Prescription(BaseModel):
    id: int = Field(..., description="Prescription identifier.")
    patient_id: int = Field(..., description="Identifier of the owning patient.")
    medication_name: str
    date_issued: datetime

    model_config = _FROZEN


class InventoryItem(BaseModel):
    """A stock line as written to the inventory file."""

    id: int = Field(..., description="Item identifier.")
    name: str
    quantity: int = Field(..., description="Units on hand.")
    date_added: datetime

    model_config = _FROZEN


class Student(BaseModel):
    """A graded student; `grade` is derived from `score` and never stored."""

    id: int = Field(..., description="Student identifier.")
    full_name: str
    score: int

    model_config = _FROZEN

    @property
    def grade(self) -> str:
        return grade_for(self.score)


__all__ = [
    "Identified",
    "Transaction",
    "Patient",
    "Prescription",
    "InventoryItem",
    "Student",
]
