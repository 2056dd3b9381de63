"""Bankomat services: authentication, accounts and transactions."""

from bankomat.services.account import AccountService
from bankomat.services.authentication import AuthenticationService
from bankomat.services.note_counter import NoteCounter
from bankomat.services.transaction_log import TransactionLog
from bankomat.services.validation import ErrorHandler

__all__ = [
    "AccountService",
    "AuthenticationService",
    "ErrorHandler",
    "NoteCounter",
    "TransactionLog",
]
