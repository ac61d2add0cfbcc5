"""
Interactive Menu Module

Text menu over the transaction engine. Input and output are injectable so the
loop can be driven by scripted answers in tests.
"""

import sys
from typing import Callable, Optional

from .config import get_config
from .logging_config import setup_logging, get_logger
from .operations import TransactionEngine, OperationType
from .storage import InMemoryBalanceStore

SEPARATOR = "--------------------------------"
MENU_LINES = (
    SEPARATOR,
    "Account Management System",
    "1. View Balance",
    "2. Credit Account",
    "3. Debit Account",
    "4. Exit",
    SEPARATOR,
)
CHOICE_PROMPT = "Enter your choice (1-4): "
CREDIT_PROMPT = "Enter credit amount: "
DEBIT_PROMPT = "Enter debit amount: "
INVALID_CHOICE_MESSAGE = "Invalid choice, please select 1-4."
GOODBYE_MESSAGE = "Exiting the program. Goodbye!"


class MainProgram:
    """Menu loop: show options, read a choice, run it, repeat until exit"""

    def __init__(
        self,
        engine: Optional[TransactionEngine] = None,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None
    ):
        self.engine = engine or TransactionEngine(InMemoryBalanceStore())
        self.input_func = input_func or input
        self.output_func = output_func or print
        self.running = True
        self.logger = get_logger("ledger.menu")

    def display_menu(self) -> None:
        for line in MENU_LINES:
            self.output_func(line)

    def get_user_choice(self) -> str:
        return self.input_func(CHOICE_PROMPT).strip()

    def evaluate_choice(self, user_choice: str) -> None:
        """Run the operation for a menu choice; unknown choices are reported"""
        if user_choice == "1":
            result = self.engine.execute(OperationType.TOTAL)
        elif user_choice == "2":
            result = self.engine.execute(OperationType.CREDIT, self.input_func(CREDIT_PROMPT))
        elif user_choice == "3":
            result = self.engine.execute(OperationType.DEBIT, self.input_func(DEBIT_PROMPT))
        elif user_choice == "4":
            self.running = False
            return
        else:
            self.logger.debug(f"Rejected menu choice {user_choice!r}")
            self.output_func(INVALID_CHOICE_MESSAGE)
            return

        self.output_func(result.message)

    def run(self) -> None:
        while self.running:
            self.display_menu()
            self.evaluate_choice(self.get_user_choice())

        self.output_func(GOODBYE_MESSAGE)


def main() -> int:
    """Console entry point"""
    settings = get_config()
    setup_logging(
        level=settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file
    )

    app = MainProgram()
    try:
        app.run()
    except (KeyboardInterrupt, EOFError):
        print()
        print(GOODBYE_MESSAGE)
    except Exception as e:
        get_logger("ledger.menu").exception("Menu loop failed")
        print(f"An error occurred: {e}", file=sys.stderr)
        return 1
    return 0
