"""
Sample input generator for the grading report.

Writes a deterministic pseudo-random `id,full_name,score` file that
`recordkeeper grades` can read. Optionally corrupts every Nth line so the
error reporting can be exercised by hand.
"""

from __future__ import annotations

import random
import sys
import time
from pathlib import Path

import typer

app = typer.Typer(help="Generate a sample student results file for the grading report.")

FIRST_NAMES = ["Ama", "Kofi", "Esi", "Kwame", "Abena", "Yaw", "Akosua", "Kojo", "Efua", "Kwesi"]
LAST_NAMES = ["Mensah", "Adu", "Owusu", "Boateng", "Asante", "Darko", "Appiah", "Ofori"]


def _generate_students_file(
    path: Path, rows: int, seed: int, corrupt_every: int | None = None
) -> int:
    """
    Write `rows` student lines to `path`; returns the number of lines written.

    When `corrupt_every` is set, every Nth line drops its score column.
    """
    rng = random.Random(seed)

    with path.open("w", encoding="utf-8") as f:
        for i in range(1, rows + 1):
            name = f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}"
            score = rng.randint(30, 100)
            if corrupt_every and i % corrupt_every == 0:
                f.write(f"{i},{name}\n")
            else:
                f.write(f"{i},{name},{score}\n")
    return rows


@app.command()
def main(
    output: Path = typer.Option(
        Path("students.txt"),
        "--output",
        "-o",
        help="Where to write the student file.",
    ),
    rows: int = typer.Option(
        20,
        "--rows",
        "-r",
        help="Number of students to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    corrupt_every: int | None = typer.Option(
        None,
        "--corrupt-every",
        help="Drop the score from every Nth line.",
    ),
) -> None:
    """
    Generate a sample student results file.
    """
    start = time.perf_counter()
    output.parent.mkdir(parents=True, exist_ok=True)
    typer.echo(f"Generating {rows:,} students -> {output} (seed={seed})")
    _generate_students_file(output, rows=rows, seed=seed, corrupt_every=corrupt_every)
    typer.echo(f"Done in {time.perf_counter() - start:.2f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
