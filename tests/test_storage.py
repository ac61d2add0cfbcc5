"""
Tests for the balance store
"""

import pytest
from decimal import Decimal

from account_ledger.errors import UnknownOperationError, LedgerError
from account_ledger.storage import (
    BalanceStoreInterface, InMemoryBalanceStore, INITIAL_BALANCE
)


class TestInMemoryBalanceStore:
    """Test read/write behaviour of the in-memory store"""

    def test_initial_balance(self):
        """Test that a new store starts at exactly 1000.00"""
        store = InMemoryBalanceStore()
        assert store.read() == Decimal('1000.00')
        assert INITIAL_BALANCE == Decimal('1000.00')

    def test_read_is_idempotent(self):
        """Test that repeated reads return identical values"""
        store = InMemoryBalanceStore()
        first = store.read()
        assert store.read() == first
        assert store.read() == first

    def test_write_replaces_and_returns_value(self):
        store = InMemoryBalanceStore()
        assert store.write(Decimal('1500.00')) == Decimal('1500.00')
        assert store.read() == Decimal('1500.00')

    def test_write_performs_no_validation(self):
        """Test that the store accepts any value; guarding is the engine's job"""
        store = InMemoryBalanceStore()
        store.write(Decimal('-10.00'))
        assert store.read() == Decimal('-10.00')

    def test_instances_are_independent(self):
        """Test that stores do not share state"""
        store_a = InMemoryBalanceStore()
        store_b = InMemoryBalanceStore()
        store_a.write(Decimal('0.00'))
        assert store_b.read() == Decimal('1000.00')

    def test_custom_initial_balance(self):
        store = InMemoryBalanceStore(Decimal('25.50'))
        assert store.read() == Decimal('25.50')

    def test_implements_interface(self):
        assert isinstance(InMemoryBalanceStore(), BalanceStoreInterface)

    def test_interface_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            BalanceStoreInterface()


class TestExecuteDispatch:
    """Test READ/WRITE dispatch by operation code"""

    def test_read(self):
        store = InMemoryBalanceStore()
        assert store.execute("READ") == Decimal('1000.00')

    def test_write(self):
        store = InMemoryBalanceStore()
        assert store.execute("WRITE", Decimal('1200.00')) == Decimal('1200.00')
        assert store.execute("READ") == Decimal('1200.00')

    def test_codes_are_normalised(self):
        store = InMemoryBalanceStore()
        assert store.execute(" read ") == Decimal('1000.00')

    def test_write_without_balance(self):
        store = InMemoryBalanceStore()
        with pytest.raises(ValueError, match="WRITE requires a balance"):
            store.execute("WRITE")
        assert store.read() == Decimal('1000.00')

    def test_unknown_operation(self):
        store = InMemoryBalanceStore()
        with pytest.raises(UnknownOperationError, match="Unknown operation"):
            store.execute("DELETE")
        with pytest.raises(LedgerError):
            store.execute(None)
