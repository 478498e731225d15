"""
Runner for executing demos by name and collecting their results.

Usage (example from CLI):
    from recordkeeper.runner import run_demos

    results = run_demos(["finance", "inventory"])
    print_results(results)

A demo that fails with a recordkeeper error is reported in its result's
`error` field; the remaining demos still run.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional

from recordkeeper.config import Settings, get_settings
from recordkeeper.demos.abstract import Demo, DemoResult
from recordkeeper.demos.finance import FinanceDemo
from recordkeeper.demos.grading import GradingDemo
from recordkeeper.demos.healthcare import HealthcareDemo
from recordkeeper.demos.inventory import InventoryDemo
from recordkeeper.exceptions import RecordKeeperError
from recordkeeper.utils.logging import get_logger

log = get_logger(__name__)


def _demo_factories() -> Dict[str, Callable[[], Demo]]:
    """Registry of available demos."""
    return {
        "finance": lambda: FinanceDemo(),
        "grading": lambda: GradingDemo(),
        "healthcare": lambda: HealthcareDemo(),
        "inventory": lambda: InventoryDemo(),
    }


def available_demos() -> List[str]:
    """List available demo names."""
    return sorted(_demo_factories().keys())


def _resolve_demo(name: str) -> Demo:
    factories = _demo_factories()
    if name not in factories:
        raise ValueError(f"Unknown demo '{name}'. Available: {', '.join(sorted(factories))}")
    return factories[name]()


def _execute(demo: Demo, settings: Settings) -> DemoResult:
    log.info(f"[DEMO START] {demo.name}", extra={"demo": demo.name})
    try:
        result = demo.execute(settings)
    except RecordKeeperError as exc:
        log.error(f"[DEMO FAILED] {demo.name}: {exc}", extra={"demo": demo.name})
        return DemoResult(demo=demo.name, lines=[], records=0, error=str(exc))

    log.info(
        f"[DEMO SUCCESS] {demo.name}",
        extra={"demo": demo.name, "records": result.get("records", 0)},
    )
    return result


def run_demos(
    demo_names: Optional[Iterable[str]] = None,
    settings: Optional[Settings] = None,
) -> List[DemoResult]:
    """
    Run one or more demos in the given order.

    Parameters
    ----------
    demo_names : iterable[str] | None
        Demo names to execute. If None or ["all"], executes all available.
    settings : Settings | None
        Settings passed to each demo. Defaults to `get_settings()`.

    Returns
    -------
    List[DemoResult]
        One result per demo, failures included.

    Raises
    ------
    ValueError
        If a name is not a registered demo. Raised before any demo runs.
    """
    settings = settings or get_settings()

    names = list(demo_names) if demo_names is not None else ["all"]
    if len(names) == 1 and names[0] == "all":
        names = available_demos()

    demos = [_resolve_demo(name) for name in names]
    results = [_execute(demo, settings) for demo in demos]

    failed = [r["demo"] for r in results if r.get("error")]
    log.info(
        f"[RUN COMPLETE] {len(results) - len(failed)}/{len(results)} demo(s) succeeded",
        extra={"demos": names, "failed": failed},
    )
    return results


__all__ = [
    "available_demos",
    "run_demos",
]
