"""
Healthcare demo: patients, prescriptions, and a per-patient prescription index.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import List, Optional

from recordkeeper.config import Settings
from recordkeeper.demos.abstract import AbstractDemo, DemoResult
from recordkeeper.domain.models import Patient, Prescription
from recordkeeper.grouping import GroupingIndex
from recordkeeper.reporter import format_patient, format_prescription
from recordkeeper.store import RecordStore
from recordkeeper.utils.logging import get_logger

log = get_logger(__name__)


class HealthcareDemo(AbstractDemo):
    """
    Look up a patient's prescriptions through a grouping index.

    The index is built once after seeding; prescriptions added later are not
    visible until `build_prescription_map` runs again.
    """

    name: str = "healthcare"
    description: str = "List patients and the prescriptions of one patient."

    def __init__(self, now: Optional[datetime] = None) -> None:
        self._now = now
        self.patients: RecordStore[Patient] = RecordStore()
        self.prescriptions: RecordStore[Prescription] = RecordStore()
        self.prescription_map: GroupingIndex[int, Prescription] = GroupingIndex()

    def seed(self) -> None:
        now = self._now or datetime.now()

        self.patients.add(Patient(id=1, name="Alice Smith", age=30, gender="Female"))
        self.patients.add(Patient(id=2, name="Kwame Mensah", age=45, gender="Male"))
        self.patients.add(Patient(id=3, name="Esi Adu", age=22, gender="Female"))

        for presc_id, patient_id, medication, days_ago in (
            (1, 1, "Amoxicillin 500mg", 10),
            (2, 1, "Paracetamol 500mg", 5),
            (3, 2, "Lisinopril 10mg", 20),
            (4, 3, "Cetirizine 10mg", 2),
            (5, 2, "Simvastatin 20mg", 1),
        ):
            self.prescriptions.add(
                Prescription(
                    id=presc_id,
                    patient_id=patient_id,
                    medication_name=medication,
                    date_issued=now - timedelta(days=days_ago),
                )
            )

    def build_prescription_map(self) -> None:
        self.prescription_map = GroupingIndex.build(
            self.prescriptions.get_all(), lambda p: p.patient_id
        )
        log.debug("Prescription map built", extra={"patients": len(self.prescription_map)})

    def prescriptions_for(self, patient_id: int) -> List[Prescription]:
        return self.prescription_map.lookup(patient_id)

    def report(self, patient_id: int) -> List[str]:
        lines = ["All patients:"]
        lines.extend(f"  {format_patient(p)}" for p in self.patients.get_all())

        patient = self.patients.get_by_id(patient_id)
        if patient is None:
            lines.append(f"No patient found with ID {patient_id}")
            return lines

        lines.append(f"Prescriptions for {patient.name} (ID {patient_id}):")
        prescriptions = self.prescriptions_for(patient_id)
        if not prescriptions:
            lines.append("  (No prescriptions found)")
            return lines

        lines.extend(f"  {format_prescription(p)}" for p in prescriptions)
        return lines

    def execute(self, settings: Settings, patient_id: Optional[int] = None) -> DemoResult:
        if not len(self.patients):
            self.seed()
        self.build_prescription_map()
        selected = settings.default_patient_id if patient_id is None else patient_id
        return DemoResult(
            demo=self.name,
            lines=self.report(selected),
            records=len(self.prescriptions_for(selected)),
        )


__all__ = ["HealthcareDemo"]
