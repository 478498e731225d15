"""
Finance demo: route transactions through processors and debit a savings account.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Tuple

from recordkeeper.config import Settings
from recordkeeper.demos.abstract import AbstractDemo, DemoResult
from recordkeeper.domain.models import Transaction
from recordkeeper.finance import Account, AccountKind, ProcessorKind, describe_processing
from recordkeeper.reporter import format_transaction
from recordkeeper.store import RecordStore
from recordkeeper.utils.logging import get_logger

log = get_logger(__name__)


class FinanceDemo(AbstractDemo):
    name: str = "finance"
    description: str = "Process three transactions against a savings account."

    def __init__(self, now: Optional[datetime] = None) -> None:
        self._now = now
        self.transactions: RecordStore[Transaction] = RecordStore()

    def seed(self) -> List[Tuple[ProcessorKind, Transaction]]:
        now = self._now or datetime.now()
        return [
            (
                ProcessorKind.MOBILE_MONEY,
                Transaction(id=1, date=now, amount=Decimal("150"), category="Groceries"),
            ),
            (
                ProcessorKind.BANK_TRANSFER,
                Transaction(id=2, date=now, amount=Decimal("400"), category="Utilities"),
            ),
            (
                ProcessorKind.CRYPTO_WALLET,
                Transaction(id=3, date=now, amount=Decimal("700"), category="Entertainment"),
            ),
        ]

    def execute(self, settings: Settings) -> DemoResult:
        account = Account(
            account_number=settings.account_number,
            balance=settings.opening_balance,
            kind=AccountKind.SAVINGS,
        )
        lines: List[str] = []
        self.transactions = RecordStore()

        for kind, transaction in self.seed():
            lines.append(describe_processing(kind, transaction))
            outcome = account.apply(transaction)
            lines.append(outcome.message)
            # Refused debits are still recorded, matching the processed history.
            self.transactions.add(transaction)

        lines.append("All transactions:")
        lines.extend(format_transaction(tx) for tx in self.transactions.get_all())
        log.info(
            "Finance demo complete",
            extra={"account": account.account_number, "balance": str(account.balance)},
        )
        return DemoResult(demo=self.name, lines=lines, records=len(self.transactions))


__all__ = ["FinanceDemo"]
