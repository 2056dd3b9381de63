"""Transaction record model for bankomat."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from bankomat.models.enums import TransactionType


@dataclass
class TransactionRecord:
    """A completed deposit or withdrawal, kept for receipts."""

    account_number: str
    transaction_type: TransactionType
    amount: Decimal
    balance_after: Decimal
    timestamp: datetime
