"""User interface abstraction used by the ATM handlers."""

from abc import ABC, abstractmethod


class UserInterface(ABC):
    """Everything the handlers need from a front end.

    Handlers only talk to this interface, so a console, web or test front
    end can be swapped in without touching business logic.
    """

    @abstractmethod
    def get_input(self, prompt: str) -> str:
        """Show ``prompt`` and return the user's answer."""

    @abstractmethod
    def show_message(self, message: str) -> None:
        """Show an informational message."""

    @abstractmethod
    def show_error(self, error_message: str) -> None:
        """Show an error message."""

    @abstractmethod
    def confirm_action(self, message: str) -> bool:
        """Ask a yes/no question; True means yes."""

    def mask_sensitive_input(self, value: str | None) -> str | None:
        """Mask a secret such as a PIN for display."""
        if value is None:
            return None
        return "*" * len(value)
