"""Simulated ATM: card login, deposits, withdrawals and balances in memory."""

__version__ = "0.1.0"
