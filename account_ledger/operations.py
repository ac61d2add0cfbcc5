"""
Transaction Engine Module

Implements view, credit and debit on top of a balance store. Amounts are
parsed from raw user text, debits are guarded against overdraft, and every
call returns an OperationResult carrying the status line to show the user.
"""

from decimal import Decimal
from dataclasses import dataclass
from typing import Optional, Union
from enum import Enum

from .amounts import parse_amount, format_balance, add_amounts, subtract_amounts
from .errors import UnknownOperationError
from .storage import BalanceStoreInterface
from .logging_config import get_logger, log_action

INSUFFICIENT_FUNDS_MESSAGE = "Insufficient funds for this debit."


class OperationType(Enum):
    """Engine operations, keyed by their operation codes"""
    TOTAL = "TOTAL"    # View balance
    CREDIT = "CREDIT"  # Add funds
    DEBIT = "DEBIT"    # Withdraw funds

    @classmethod
    def from_code(cls, code: Union[str, 'OperationType']) -> 'OperationType':
        """Resolve an operation code such as "DEBIT " (padded codes are accepted)"""
        if isinstance(code, cls):
            return code
        if isinstance(code, str):
            try:
                return cls(code.strip().upper())
            except ValueError:
                pass
        raise UnknownOperationError(code)


class OperationStatus(Enum):
    """Outcome of an engine operation"""
    COMPLETED = "completed"
    REJECTED = "rejected"


@dataclass(frozen=True)
class OperationResult:
    """Result of a single engine operation"""
    operation: OperationType
    status: OperationStatus
    balance: Decimal                 # Balance after the operation
    message: str
    amount: Optional[Decimal] = None  # Parsed amount, None for view

    @property
    def is_completed(self) -> bool:
        return self.status == OperationStatus.COMPLETED

    @property
    def is_rejected(self) -> bool:
        return self.status == OperationStatus.REJECTED

    def __str__(self) -> str:
        return self.message


class TransactionEngine:
    """
    Applies view/credit/debit semantics to a balance store.

    The store is written only after parsing and, for debits, after the
    sufficient-funds check has passed.
    """

    def __init__(self, store: BalanceStoreInterface):
        self.store = store
        self.logger = get_logger("ledger.operations")

    def execute(self, operation: Union[str, OperationType],
                raw_input: Optional[str] = None) -> OperationResult:
        """
        Run an operation by type or code

        Args:
            operation: OperationType or code ("TOTAL", "CREDIT", "DEBIT")
            raw_input: Amount text for credit and debit

        Returns:
            OperationResult of the dispatched operation

        Raises:
            UnknownOperationError: If the operation code is not recognised
        """
        operation_type = OperationType.from_code(operation)

        if operation_type == OperationType.TOTAL:
            return self.view_balance()
        if operation_type == OperationType.CREDIT:
            return self.credit_account(raw_input)
        return self.debit_account(raw_input)

    def view_balance(self) -> OperationResult:
        """Report the current balance without changing it"""
        balance = self.store.read()
        return OperationResult(
            operation=OperationType.TOTAL,
            status=OperationStatus.COMPLETED,
            balance=balance,
            message=f"Current balance: {format_balance(balance)}"
        )

    def credit_account(self, raw_input: Optional[str]) -> OperationResult:
        """
        Add a user-supplied amount to the balance

        Credits have no ceiling; balances wider than six integer digits are
        displayed without truncation.
        """
        amount = self._parse(raw_input)

        balance = self.store.read()
        new_balance = self.store.write(add_amounts(balance, amount))

        log_action(
            self.logger, "info", "Account credited",
            action="credit", resource="balance",
            extra={"amount": str(amount), "balance": str(new_balance)}
        )

        return OperationResult(
            operation=OperationType.CREDIT,
            status=OperationStatus.COMPLETED,
            balance=new_balance,
            amount=amount,
            message=f"Amount credited. New balance: {format_balance(new_balance)}"
        )

    def debit_account(self, raw_input: Optional[str]) -> OperationResult:
        """
        Subtract a user-supplied amount from the balance

        When the balance does not cover the amount nothing is written and a
        REJECTED result is returned.
        """
        amount = self._parse(raw_input)

        balance = self.store.read()
        if balance < amount:
            log_action(
                self.logger, "warning", "Debit rejected: insufficient funds",
                action="debit", resource="balance",
                extra={"amount": str(amount), "balance": str(balance)}
            )
            return OperationResult(
                operation=OperationType.DEBIT,
                status=OperationStatus.REJECTED,
                balance=balance,
                amount=amount,
                message=INSUFFICIENT_FUNDS_MESSAGE
            )

        new_balance = self.store.write(subtract_amounts(balance, amount))

        log_action(
            self.logger, "info", "Account debited",
            action="debit", resource="balance",
            extra={"amount": str(amount), "balance": str(new_balance)}
        )

        return OperationResult(
            operation=OperationType.DEBIT,
            status=OperationStatus.COMPLETED,
            balance=new_balance,
            amount=amount,
            message=f"Amount debited. New balance: {format_balance(new_balance)}"
        )

    def _parse(self, raw_input: Optional[str]) -> Decimal:
        amount = parse_amount(raw_input)
        self.logger.debug(f"Parsed amount {raw_input!r} as {amount}")
        return amount
