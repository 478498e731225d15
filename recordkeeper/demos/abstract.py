"""
Demo interfaces and result contracts for recordkeeper.

Each demo reproduces one console program: it seeds its own in-memory stores,
performs a single pass over them, and returns its report lines as a
DemoResult so the runner and the CLI can render every demo the same way.
"""

from __future__ import annotations

import abc
from typing import List, Optional, Protocol, TypedDict, runtime_checkable

from recordkeeper.config import Settings


class DemoResult(TypedDict, total=False):
    """
    Output contract returned by demos.

    `lines` holds the report in display order; `records` counts the records
    the demo ended up reporting on.
    """

    demo: str
    lines: List[str]
    records: int
    error: Optional[str]


@runtime_checkable
class Demo(Protocol):
    """
    Common interface all demos implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    description : str
        A human-friendly summary of the program.
    """

    name: str
    description: str

    def execute(self, settings: Settings) -> DemoResult:
        """Seed, run, and report."""
        ...


class AbstractDemo(abc.ABC):
    """
    ABC helper for class-based demos.

    Subclasses set `name` and `description` and implement `execute`.
    """

    name: str
    description: str

    @abc.abstractmethod
    def execute(self, settings: Settings) -> DemoResult:  # pragma: no cover - interface only
        raise NotImplementedError


__all__ = ["DemoResult", "Demo", "AbstractDemo"]
