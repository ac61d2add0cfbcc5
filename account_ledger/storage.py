"""
Balance Storage Module

Provides the abstract balance store interface and the in-memory implementation.
The store holds a single Decimal balance and performs no validation; the
overdraft guard lives in the transaction engine.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

from .errors import UnknownOperationError

INITIAL_BALANCE = Decimal('1000.00')


class BalanceStoreInterface(ABC):
    """Abstract interface for balance stores"""

    @abstractmethod
    def read(self) -> Decimal:
        """Return the current balance"""
        pass

    @abstractmethod
    def write(self, new_balance: Decimal) -> Decimal:
        """Replace the stored balance and return it"""
        pass

    def execute(self, operation: str, balance: Optional[Decimal] = None) -> Decimal:
        """
        Dispatch a READ or WRITE request by operation code

        Args:
            operation: "READ" or "WRITE"
            balance: New balance, required for WRITE

        Returns:
            The current balance after the request

        Raises:
            UnknownOperationError: If the operation code is not recognised
            ValueError: If WRITE is requested without a balance
        """
        code = operation.strip().upper() if isinstance(operation, str) else operation
        if code == "READ":
            return self.read()
        if code == "WRITE":
            if balance is None:
                raise ValueError("WRITE requires a balance")
            return self.write(balance)
        raise UnknownOperationError(operation)


class InMemoryBalanceStore(BalanceStoreInterface):
    """In-memory balance store; every instance starts from its own initial balance"""

    def __init__(self, initial_balance: Decimal = INITIAL_BALANCE):
        self._balance = initial_balance

    def read(self) -> Decimal:
        return self._balance

    def write(self, new_balance: Decimal) -> Decimal:
        self._balance = new_balance
        return self._balance
