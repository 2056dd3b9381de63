"""User interface layer for bankomat."""

from bankomat.ui.console import ConsoleUI
from bankomat.ui.handlers import AccountHandler, AuthenticationHandler, TransactionHandler
from bankomat.ui.interface import UserInterface
from bankomat.ui.menu import ConsoleMenu

__all__ = [
    "AccountHandler",
    "AuthenticationHandler",
    "ConsoleMenu",
    "ConsoleUI",
    "TransactionHandler",
    "UserInterface",
]
