from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from recordkeeper.config import Settings
from recordkeeper.demos import FinanceDemo, GradingDemo, HealthcareDemo, InventoryDemo
from recordkeeper.domain.models import Prescription
from recordkeeper.exceptions import StorageIOError
from recordkeeper.runner import available_demos, run_demos


def test_finance_demo_refuses_third_transaction(test_settings: Settings, fixed_now: datetime) -> None:
    result = FinanceDemo(now=fixed_now).execute(test_settings)

    assert result["records"] == 3
    assert result["lines"][6] == "All transactions:"
    assert result["lines"][:6] == [
        "[MobileMoney] Processing Groceries of $150.00 (ID: 1)",
        "Transaction 1 applied. Updated balance: $850.00",
        "[BankTransfer] Processing Utilities of $400.00 (ID: 2)",
        "Transaction 2 applied. Updated balance: $450.00",
        "[CryptoWallet] Processing Entertainment of $700.00 (ID: 3)",
        "Insufficient funds",
    ]


def test_healthcare_prescriptions_grouped_by_patient(fixed_now: datetime) -> None:
    demo = HealthcareDemo(now=fixed_now)
    demo.seed()
    demo.build_prescription_map()

    assert [p.id for p in demo.prescriptions_for(2)] == [3, 5]
    assert demo.prescriptions_for(42) == []


def test_healthcare_report_for_known_patient(test_settings: Settings, fixed_now: datetime) -> None:
    result = HealthcareDemo(now=fixed_now).execute(test_settings, patient_id=1)

    assert result["lines"][0] == "All patients:"
    assert "Prescriptions for Alice Smith (ID 1):" in result["lines"]
    assert "  Presc[1] Amoxicillin 500mg (Issued: 2024-03-05)" in result["lines"]
    assert result["records"] == 2


def test_healthcare_report_for_unknown_patient(fixed_now: datetime) -> None:
    demo = HealthcareDemo(now=fixed_now)
    demo.seed()
    demo.build_prescription_map()

    assert demo.report(9)[-1] == "No patient found with ID 9"


def test_healthcare_patient_without_prescriptions(fixed_now: datetime) -> None:
    demo = HealthcareDemo(now=fixed_now)
    demo.seed()
    demo.prescriptions.remove_first(lambda p: p.patient_id == 3)
    demo.build_prescription_map()

    assert demo.report(3)[-1] == "  (No prescriptions found)"


def test_healthcare_map_is_stale_until_rebuilt(fixed_now: datetime) -> None:
    demo = HealthcareDemo(now=fixed_now)
    demo.seed()
    demo.build_prescription_map()
    demo.prescriptions.add(
        Prescription(id=6, patient_id=3, medication_name="Ibuprofen", date_issued=fixed_now)
    )

    assert [p.id for p in demo.prescriptions_for(3)] == [4]
    demo.build_prescription_map()
    assert [p.id for p in demo.prescriptions_for(3)] == [4, 6]


def test_inventory_demo_round_trips_through_file(
    test_settings: Settings, fixed_now: datetime, tmp_path: Path
) -> None:
    result = InventoryDemo(now=fixed_now).execute(test_settings)

    assert (tmp_path / "inventory.json").exists()
    assert result["records"] == 5
    assert result["lines"][0] == "Inventory Items:"
    assert result["lines"][1] == "ID: 1, Name: Laptop, Qty: 5, Date Added: 2024-03-15 09:30:00"


def test_grading_demo_writes_report(test_settings: Settings, students_file: Path, tmp_path: Path) -> None:
    result = GradingDemo().execute(test_settings)

    assert result["records"] == 4
    assert (tmp_path / "report.txt").read_text(encoding="utf-8").count("\n") == 4
    assert result["lines"][-1].startswith("Report generated successfully at")


def test_grading_demo_without_input_reports_no_input(test_settings: Settings, tmp_path: Path) -> None:
    result = GradingDemo().execute(test_settings)

    assert "error" not in result
    assert result["records"] == 0
    assert result["lines"][0] == f"No student input file found at {tmp_path / 'students.txt'}."
    assert not (tmp_path / "report.txt").exists()


def test_grading_demo_unreadable_input_still_raises(test_settings: Settings, tmp_path: Path) -> None:
    with pytest.raises(StorageIOError):
        GradingDemo(input_path=tmp_path).execute(test_settings)


def test_available_demos_sorted() -> None:
    assert available_demos() == ["finance", "grading", "healthcare", "inventory"]


def test_run_demos_records_failures_and_continues(test_settings: Settings, tmp_path: Path) -> None:
    (tmp_path / "students.txt").write_text("1,OnlyTwoFields\n", encoding="utf-8")

    results = run_demos(["grading", "finance"], settings=test_settings)

    assert [r["demo"] for r in results] == ["grading", "finance"]
    assert results[0]["error"]
    assert "error" not in results[1]


def test_run_demos_all(test_settings: Settings, students_file: Path) -> None:
    results = run_demos(["all"], settings=test_settings)

    assert [r["demo"] for r in results] == available_demos()
    assert not any(r.get("error") for r in results)


def test_run_demos_unknown_name(test_settings: Settings) -> None:
    with pytest.raises(ValueError, match="Unknown demo"):
        run_demos(["payroll"], settings=test_settings)


def test_finance_demo_execute_twice_does_not_duplicate(
    test_settings: Settings, fixed_now: datetime
) -> None:
    demo = FinanceDemo(now=fixed_now)

    first = demo.execute(test_settings)
    second = demo.execute(test_settings)

    assert first["records"] == second["records"] == 3
    assert [tx.id for tx in demo.transactions.get_all()] == [1, 2, 3]
    assert second["lines"] == first["lines"]
