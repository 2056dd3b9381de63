"""Simulated note counter for cash deposits."""

from collections.abc import Iterable, Mapping

from bankomat.exceptions import InvalidAmountError, InvalidDenominationError

DEFAULT_DENOMINATIONS = (100, 200, 500)


class NoteCounter:
    """Count deposited notes and reject denominations the machine cannot take.

    Parameters
    ----------
    denominations : Iterable[int]
        Accepted note values (default 100, 200 and 500).
    """

    def __init__(self, denominations: Iterable[int] = DEFAULT_DENOMINATIONS) -> None:
        self.denominations = tuple(denominations)

    def count_and_verify(self, notes: Mapping[int, int]) -> int:
        """Return the total value of ``notes`` (denomination -> count).

        The whole batch is rejected on the first bad entry, so a caller
        never sees a partial sum.

        Raises
        ------
        InvalidDenominationError
            If a denomination is not accepted.
        InvalidAmountError
            If a note count is negative.
        """
        total = 0
        for denomination, count in notes.items():
            if denomination not in self.denominations:
                raise InvalidDenominationError(denomination)
            if count < 0:
                raise InvalidAmountError(
                    f"Invalid note count for {denomination}: {count}"
                )
            total += denomination * count
        return total
