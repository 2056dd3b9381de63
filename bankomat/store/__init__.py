"""In-memory repositories for cards and accounts."""

from bankomat.store.repositories import AccountRepository, CardRepository

__all__ = ["AccountRepository", "CardRepository"]
