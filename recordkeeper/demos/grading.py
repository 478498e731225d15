"""
Grading demo: read a student results file and write a graded report.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from recordkeeper.config import Settings
from recordkeeper.demos.abstract import AbstractDemo, DemoResult
from recordkeeper.grading import read_students, write_report
from recordkeeper.reporter import format_student
from recordkeeper.utils.logging import get_logger

log = get_logger(__name__)


class GradingDemo(AbstractDemo):
    name: str = "grading"
    description: str = "Grade students from a delimited file into a text report."

    def __init__(
        self, input_path: Optional[Path] = None, output_path: Optional[Path] = None
    ) -> None:
        self._input_path = input_path
        self._output_path = output_path

    def execute(self, settings: Settings) -> DemoResult:
        input_path = self._input_path or settings.resolve(settings.students_file)
        output_path = self._output_path or settings.resolve(settings.report_file)

        if not input_path.exists():
            # No input is a skipped run, not a failure; other read errors still raise.
            log.info("No student input file found", extra={"path": str(input_path)})
            return DemoResult(
                demo=self.name,
                lines=[
                    f"No student input file found at {input_path}.",
                    "Generate one with scripts/generate_students.py.",
                ],
                records=0,
            )

        students = read_students(input_path)
        write_report(students, output_path)

        lines = [format_student(student) for student in students]
        lines.append(f"Report generated successfully at {output_path}")
        return DemoResult(demo=self.name, lines=lines, records=len(students))


__all__ = ["GradingDemo"]
