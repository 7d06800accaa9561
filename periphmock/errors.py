"""Exception types for periphmock."""

from __future__ import annotations

from typing import Optional, Sequence

from .transactions import MockTransaction


class PeripheralError(Exception):
    """Declared failure of a peripheral capability.

    Real bus and pin implementations raise these; the mock handles never do,
    so drivers see a well-behaved peripheral and divergence only shows up at
    verification time.
    """


class TransferError(PeripheralError):
    """A bus transfer failed."""


class PinError(PeripheralError):
    """A digital line could not be read or driven."""


class VerificationError(AssertionError):
    """Recorded calls differ from the expected sequence."""

    def __init__(
        self,
        message: str,
        *,
        index: Optional[int],
        expected: Sequence[MockTransaction],
        actual: Sequence[MockTransaction],
    ) -> None:
        super().__init__(message)
        self.index = index
        self.expected = tuple(expected)
        self.actual = tuple(actual)


__all__ = ["PeripheralError", "TransferError", "PinError", "VerificationError"]
