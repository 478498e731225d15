"""
Demos package for recordkeeper.

Re-exports the demo interfaces and the concrete demo classes so downstream
code can import from `recordkeeper.demos` directly.
"""

from recordkeeper.demos.abstract import AbstractDemo, Demo, DemoResult
from recordkeeper.demos.finance import FinanceDemo
from recordkeeper.demos.grading import GradingDemo
from recordkeeper.demos.healthcare import HealthcareDemo
from recordkeeper.demos.inventory import InventoryDemo

__all__ = [
    # Abstracts
    "AbstractDemo",
    "Demo",
    "DemoResult",
    # Concrete demos
    "FinanceDemo",
    "GradingDemo",
    "HealthcareDemo",
    "InventoryDemo",
]
