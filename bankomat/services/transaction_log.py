"""Record of completed deposits and withdrawals."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from bankomat.logging import get_logger
from bankomat.models import TransactionRecord, TransactionType

logger = get_logger(__name__)


@dataclass
class TransactionLog:
    """In-memory transaction journal, also mirrored to the log."""

    entries: list[TransactionRecord] = field(default_factory=list)

    # Relationship index
    _account_entries: dict[str, list[int]] = field(default_factory=dict)

    def log_deposit(self, account_number: str, amount: Decimal, balance_after: Decimal) -> TransactionRecord:
        return self._record(account_number, TransactionType.DEPOSIT, amount, balance_after)

    def log_withdrawal(self, account_number: str, amount: Decimal, balance_after: Decimal) -> TransactionRecord:
        return self._record(account_number, TransactionType.WITHDRAWAL, amount, balance_after)

    def for_account(self, account_number: str) -> list[TransactionRecord]:
        """Get all records for an account, oldest first."""
        indices = self._account_entries.get(account_number, [])
        return [self.entries[i] for i in indices]

    def _record(
        self,
        account_number: str,
        transaction_type: TransactionType,
        amount: Decimal,
        balance_after: Decimal,
    ) -> TransactionRecord:
        record = TransactionRecord(
            account_number=account_number,
            transaction_type=transaction_type,
            amount=amount,
            balance_after=balance_after,
            timestamp=datetime.now(),
        )
        idx = len(self.entries)
        self.entries.append(record)
        self._account_entries.setdefault(account_number, []).append(idx)
        logger.info(
            "Logged %s of %s to account %s",
            transaction_type.value.lower(),
            amount,
            account_number,
        )
        return record
