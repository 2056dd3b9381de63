"""Tests for AccountService: lookups, withdrawals and deposits."""

from decimal import Decimal

import pytest

from bankomat.config import CurrencyConfig
from bankomat.models import Account, ErrorCode, TransactionType
from bankomat.services import AccountService
from bankomat.store import AccountRepository


def balance_of(service: AccountService, number: str = "1234") -> Decimal:
    return service.get_account(number).balance


class TestLookups:
    """Tests for account lookups."""

    def test_get_account(self, account_service: AccountService) -> None:
        account = account_service.get_account("1234")

        assert account.account_name == "Test account"

    def test_get_unknown_account(self, account_service: AccountService) -> None:
        assert account_service.get_account("9999") is None

    def test_account_exists(self, account_service: AccountService) -> None:
        assert account_service.account_exists("1234").success is True

    def test_account_does_not_exist(self, account_service: AccountService) -> None:
        result = account_service.account_exists("9999")

        assert result.success is False
        assert result.error_code == ErrorCode.ACCOUNT_NOT_FOUND

    def test_find_accounts_for_card(
        self, account_service: AccountService, account_repository: AccountRepository
    ) -> None:
        account_repository.link_account_to_card("1234", "123456789012")

        accounts = account_service.find_accounts_for_card("123456789012")

        assert [a.account_number for a in accounts] == ["1234"]


class TestUpdateBalance:
    """Tests for update_balance."""

    def test_replaces_stored_value(self, account_service: AccountService) -> None:
        before = account_service.get_account("1234")

        updated = account_service.update_balance("1234", Decimal("250"))

        assert updated.balance == Decimal("250")
        assert account_service.get_account("1234") is updated
        assert before.balance == Decimal("1000")

    def test_unknown_account(self, account_service: AccountService) -> None:
        assert account_service.update_balance("9999", Decimal("1")) is None


class TestHasEnoughBalance:
    """Tests for has_enough_balance."""

    def test_enough(self, account_service: AccountService) -> None:
        assert account_service.has_enough_balance("1234", 1000).success is True

    def test_not_enough(self, account_service: AccountService) -> None:
        result = account_service.has_enough_balance("1234", 1200)

        assert result.success is False
        assert result.error_code == ErrorCode.INSUFFICIENT_FUNDS
        assert "Available: 1 000,00 kr" in result.message
        assert "Requested: 1 200,00 kr" in result.message

    def test_unknown_account(self, account_service: AccountService) -> None:
        result = account_service.has_enough_balance("9999", 1)

        assert result.error_code == ErrorCode.ACCOUNT_NOT_FOUND

    @pytest.mark.parametrize("amount", [float("nan"), Decimal("NaN"), "abc", 0, -5, Decimal("1e5000000")])
    def test_invalid_amount(self, account_service: AccountService, amount) -> None:
        result = account_service.has_enough_balance("1234", amount)

        assert result.success is False
        assert result.error_code == ErrorCode.INVALID_AMOUNT


class TestWithdraw:
    """Tests for withdraw."""

    def test_successful_withdrawal(self, account_service: AccountService) -> None:
        result = account_service.withdraw("1234", 300.0)

        assert result.success is True
        assert result.new_balance == Decimal("700")
        assert balance_of(account_service) == Decimal("700")

    def test_withdraw_entire_balance(self, account_service: AccountService) -> None:
        result = account_service.withdraw("1234", Decimal("1000"))

        assert result.success is True
        assert result.new_balance == 0
        assert balance_of(account_service) == 0

    def test_insufficient_funds(self, account_service: AccountService) -> None:
        result = account_service.withdraw("1234", 1200.0)

        assert result.success is False
        assert result.error_code == ErrorCode.INSUFFICIENT_FUNDS
        assert "1 000,00 kr" in result.message
        assert balance_of(account_service) == Decimal("1000")

    @pytest.mark.parametrize("amount", [Decimal("1000.01"), 5000, 10**9])
    def test_any_amount_over_balance_fails(self, account_service: AccountService, amount) -> None:
        result = account_service.withdraw("1234", amount)

        assert result.error_code == ErrorCode.INSUFFICIENT_FUNDS
        assert balance_of(account_service) == Decimal("1000")

    @pytest.mark.parametrize("amount", [0, -1, Decimal("-0.01"), -1000.0, float("nan")])
    def test_non_positive_amount(self, account_service: AccountService, amount) -> None:
        result = account_service.withdraw("1234", amount)

        assert result.success is False
        assert result.error_code == ErrorCode.INVALID_AMOUNT
        assert balance_of(account_service) == Decimal("1000")

    def test_invalid_amount_checked_before_account(self, account_service: AccountService) -> None:
        result = account_service.withdraw("9999", 0)

        assert result.error_code == ErrorCode.INVALID_AMOUNT

    @pytest.mark.parametrize("amount", [Decimal("0.001"), Decimal("12.345"), "0.005"])
    def test_sub_cent_amount_rejected(self, account_service: AccountService, amount) -> None:
        result = account_service.withdraw("1234", amount)

        assert result.error_code == ErrorCode.INVALID_AMOUNT
        assert balance_of(account_service) == Decimal("1000.00")

    def test_trailing_zeros_are_whole_cents(self, account_service: AccountService) -> None:
        result = account_service.withdraw("1234", Decimal("100.000"))

        assert result.new_balance == Decimal("900.00")

    def test_unknown_account(self, account_service: AccountService) -> None:
        result = account_service.withdraw("9999", 100)

        assert result.error_code == ErrorCode.ACCOUNT_NOT_FOUND

    def test_withdrawal_is_logged(self, account_service: AccountService) -> None:
        account_service.withdraw("1234", 100)

        [record] = account_service.transaction_log.for_account("1234")
        assert record.transaction_type == TransactionType.WITHDRAWAL
        assert record.amount == Decimal("100")
        assert record.balance_after == Decimal("900")

    def test_failed_withdrawal_not_logged(self, account_service: AccountService) -> None:
        account_service.withdraw("1234", 5000)

        assert account_service.transaction_log.for_account("1234") == []


class TestDeposit:
    """Tests for deposit."""

    def test_successful_deposit(self, account_service: AccountService) -> None:
        result = account_service.deposit("1234", {100: 2, 200: 1}, confirmed=True)

        assert result.success is True
        assert result.new_balance == Decimal("1400")
        assert balance_of(account_service) == Decimal("1400")

    @pytest.mark.parametrize(
        ("notes", "expected"),
        [
            ({}, Decimal("1000")),
            ({500: 1}, Decimal("1500")),
            ({100: 0, 200: 0, 500: 0}, Decimal("1000")),
            ({100: 3, 200: 2, 500: 4}, Decimal("3700")),
        ],
    )
    def test_balance_increases_by_note_sum(
        self, account_service: AccountService, notes: dict[int, int], expected: Decimal
    ) -> None:
        result = account_service.deposit("1234", notes, confirmed=True)

        assert result.new_balance == expected

    def test_unconfirmed_deposit(self, account_service: AccountService) -> None:
        result = account_service.deposit("1234", {100: 2}, confirmed=False)

        assert result.success is False
        assert result.error_code == ErrorCode.VALIDATION_ERROR
        assert result.message == "Deposit cancelled - not confirmed"
        assert balance_of(account_service) == Decimal("1000")

    def test_invalid_denomination(self, account_service: AccountService) -> None:
        result = account_service.deposit("1234", {50: 2}, confirmed=True)

        assert result.success is False
        assert result.error_code == ErrorCode.INVALID_AMOUNT
        assert "50" in result.message
        assert balance_of(account_service) == Decimal("1000")

    def test_invalid_denomination_discards_valid_notes(self, account_service: AccountService) -> None:
        result = account_service.deposit("1234", {100: 5, 50: 1, 500: 1}, confirmed=True)

        assert result.error_code == ErrorCode.INVALID_AMOUNT
        assert balance_of(account_service) == Decimal("1000")

    def test_negative_note_count(self, account_service: AccountService) -> None:
        result = account_service.deposit("1234", {100: -3}, confirmed=True)

        assert result.error_code == ErrorCode.INVALID_AMOUNT
        assert balance_of(account_service) == Decimal("1000")

    def test_unknown_account(self, account_service: AccountService) -> None:
        result = account_service.deposit("9999", {100: 1}, confirmed=True)

        assert result.error_code == ErrorCode.ACCOUNT_NOT_FOUND

    def test_unknown_account_checked_before_confirmation(self, account_service: AccountService) -> None:
        result = account_service.deposit("9999", {100: 1}, confirmed=False)

        assert result.error_code == ErrorCode.ACCOUNT_NOT_FOUND

    def test_deposit_beyond_balance_range(self, account_service: AccountService) -> None:
        result = account_service.deposit("1234", {500: 10**13}, confirmed=True)

        assert result.error_code == ErrorCode.INVALID_AMOUNT
        assert balance_of(account_service) == Decimal("1000")

    def test_deposit_is_logged(self, account_service: AccountService) -> None:
        account_service.deposit("1234", {200: 2}, confirmed=True)

        [record] = account_service.transaction_log.for_account("1234")
        assert record.transaction_type == TransactionType.DEPOSIT
        assert record.amount == Decimal("400")
        assert record.balance_after == Decimal("1400")

    def test_custom_denominations(self, account_repository: AccountRepository) -> None:
        account_repository.save(Account("1", "Euro account", Decimal("0")))
        service = AccountService(account_repository, CurrencyConfig(denominations=(5, 10, 20, 50)))

        assert service.deposit("1", {50: 2, 5: 1}, confirmed=True).new_balance == Decimal("105")
        assert service.deposit("1", {100: 1}, confirmed=True).error_code == ErrorCode.INVALID_AMOUNT


class TestFormattedBalance:
    """Tests for get_formatted_balance."""

    def test_formatted_balance(self, account_repository: AccountRepository) -> None:
        account_repository.save(Account("1001", "Salary account", 5000.0))
        service = AccountService(account_repository)

        assert service.get_formatted_balance("1001") == "5 000,00 kr"

    def test_unknown_account(self, account_service: AccountService) -> None:
        assert account_service.get_formatted_balance("9999") is None
