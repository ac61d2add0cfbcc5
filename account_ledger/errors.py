"""
Ledger error types.

Business rejections such as insufficient funds are reported through
OperationResult, not raised. These exceptions cover misuse at the dispatch
seams only.
"""


class LedgerError(ValueError):
    """Base class for ledger errors"""


class UnknownOperationError(LedgerError):
    """Raised when an operation code is not recognised"""

    def __init__(self, code):
        self.code = code
        super().__init__(f"Unknown operation: {code!r}")
