"""
Transaction processing and account balances.

Processors and accounts are plain tags with behavior tables rather than class
hierarchies: a processor only contributes its display label, and an account
kind only decides whether a debit may exceed the balance.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Dict

from recordkeeper.domain.models import Transaction
from recordkeeper.utils.logging import get_logger

log = get_logger(__name__)


class ProcessorKind(str, Enum):
    BANK_TRANSFER = "bank_transfer"
    MOBILE_MONEY = "mobile_money"
    CRYPTO_WALLET = "crypto_wallet"


class AccountKind(str, Enum):
    STANDARD = "standard"
    SAVINGS = "savings"


PROCESSOR_LABELS: Dict[ProcessorKind, str] = {
    ProcessorKind.BANK_TRANSFER: "BankTransfer",
    ProcessorKind.MOBILE_MONEY: "MobileMoney",
    ProcessorKind.CRYPTO_WALLET: "CryptoWallet",
}

OVERDRAFT_ALLOWED: Dict[AccountKind, bool] = {
    AccountKind.STANDARD: True,
    AccountKind.SAVINGS: False,
}

# Fields: id, amount, balance (amount and balance preformatted as money).
APPLIED_MESSAGES: Dict[AccountKind, str] = {
    AccountKind.STANDARD: "Applied transaction {id}: -{amount}. New balance: {balance}",
    AccountKind.SAVINGS: "Transaction {id} applied. Updated balance: {balance}",
}


def format_money(amount: Decimal) -> str:
    if amount < 0:
        return f"-${-amount:,.2f}"
    return f"${amount:,.2f}"


def describe_processing(kind: ProcessorKind, transaction: Transaction) -> str:
    """Return the line a processor reports when it handles `transaction`."""
    return (
        f"[{PROCESSOR_LABELS[kind]}] Processing {transaction.category} of "
        f"{format_money(transaction.amount)} (ID: {transaction.id})"
    )


@dataclass(frozen=True)
class TransactionOutcome:
    applied: bool
    balance: Decimal
    message: str


@dataclass
class Account:
    """A balance that transactions are debited from."""

    account_number: str
    balance: Decimal
    kind: AccountKind = AccountKind.STANDARD

    def apply(self, transaction: Transaction) -> TransactionOutcome:
        """
        Debit `transaction.amount` from the balance.

        Accounts that do not allow an overdraft refuse a debit larger than the
        current balance and keep the balance unchanged.
        """
        if not OVERDRAFT_ALLOWED[self.kind] and transaction.amount > self.balance:
            log.warning(
                "Insufficient funds",
                extra={
                    "account": self.account_number,
                    "transaction_id": transaction.id,
                    "amount": str(transaction.amount),
                    "balance": str(self.balance),
                },
            )
            return TransactionOutcome(
                applied=False, balance=self.balance, message="Insufficient funds"
            )

        self.balance -= transaction.amount
        message = APPLIED_MESSAGES[self.kind].format(
            id=transaction.id,
            amount=format_money(transaction.amount),
            balance=format_money(self.balance),
        )
        return TransactionOutcome(applied=True, balance=self.balance, message=message)


__all__ = [
    "ProcessorKind",
    "AccountKind",
    "PROCESSOR_LABELS",
    "OVERDRAFT_ALLOWED",
    "APPLIED_MESSAGES",
    "format_money",
    "describe_processing",
    "TransactionOutcome",
    "Account",
]
