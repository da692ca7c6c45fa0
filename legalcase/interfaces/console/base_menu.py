from typing import Callable, List, Optional, Tuple

import structlog

from legalcase.core.exceptions import AppError, describe_error
from legalcase.interfaces.console.helper import ConsoleIO

logger = structlog.get_logger(__name__)

Action = Callable[[], None]


class Menu:
    """A numbered menu; the last entry always leaves it."""

    title = ""
    back_label = "Return to Main Menu"

    def __init__(self, io: ConsoleIO):
        self.io = io

    def options(self) -> List[Tuple[str, Action]]:
        raise NotImplementedError

    def prompt(self) -> Optional[Action]:
        """Render the menu once and return the picked action, or None for back."""
        options = self.options()
        self.io.clear()
        self.io.header(self.title)
        for number, (description, _) in enumerate(options, start=1):
            self.io.option(number, description)
        self.io.option(len(options) + 1, self.back_label)
        self.io.line()

        choice = self.io.read_int("Enter your choice", 1, len(options) + 1)
        if choice == len(options) + 1:
            return None
        return options[choice - 1][1]

    def perform(self, action: Action) -> None:
        try:
            action()
        except AppError as exc:
            logger.info("Menu action failed", menu=self.title, error=exc.message)
            self.io.error(describe_error(exc))

    def run(self) -> None:
        while True:
            action = self.prompt()
            if action is None:
                return
            self.perform(action)
            self.io.pause()

    def read_id(self, what: str) -> int:
        return self.io.read_int(f"Enter {what} ID", 1)
