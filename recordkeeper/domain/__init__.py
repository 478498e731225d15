"""
Domain package for recordkeeper.

Exports the record models shared by the store, the persistence layer, and the
demos. Keep this package focused on data definitions and derived fields.
"""

from recordkeeper.domain.grades import GRADE_BANDS, grade_for
from recordkeeper.domain.models import (
    Identified,
    InventoryItem,
    Patient,
    Prescription,
    Student,
    Transaction,
)

__all__ = [
    "GRADE_BANDS",
    "grade_for",
    "Identified",
    "InventoryItem",
    "Patient",
    "Prescription",
    "Student",
    "Transaction",
]
