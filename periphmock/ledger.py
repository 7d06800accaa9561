"""Shared expectation/actual ledger behind every mock handle.

The ledger holds the expected call sequence, a cursor into it, and the log of
calls that actually happened. Matching is purely positional: expectation ``n``
corresponds to recorded call ``n`` no matter which handle issued it. All access
goes through a single re-entrant lock so handles may be driven from several
threads without corrupting the cursor.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .errors import VerificationError
from .transactions import NO_EXPECTATION, MockTransaction

logger = logging.getLogger(__name__)


def first_divergence(
    expected: Sequence[MockTransaction], actual: Sequence[MockTransaction]
) -> Optional[int]:
    """Index of the first differing position, or ``None`` when equal."""

    for index, (want, got) in enumerate(zip(expected, actual)):
        if want != got:
            return index
    if len(expected) != len(actual):
        return min(len(expected), len(actual))
    return None


def format_report(
    expected: Sequence[MockTransaction],
    actual: Sequence[MockTransaction],
    index: int,
) -> str:
    lines = [
        f"mock verification failed at index {index} "
        f"(expected {len(expected)} transactions, recorded {len(actual)})"
    ]
    for pos in range(max(len(expected), len(actual))):
        want = str(expected[pos]) if pos < len(expected) else "<nothing>"
        got = str(actual[pos]) if pos < len(actual) else "<nothing>"
        marker = ">" if pos == index else " "
        lines.append(f"{marker} [{pos}] expected: {want}")
        lines.append(f"{' ' * (len(str(pos)) + 5)}actual:   {got}")
    return "\n".join(lines)


class Ledger:
    """Positional expectation ledger shared by a set of handles."""

    def __init__(self, *, trace: bool = False) -> None:
        self._lock = threading.RLock()
        self._cursor = 0
        self._expected: List[MockTransaction] = []
        self._actual: List[MockTransaction] = []
        self.trace = trace

    @contextmanager
    def transaction(self) -> Iterator["Ledger"]:
        """Hold the ledger lock for one logical peek/record operation."""

        with self._lock:
            yield self

    def load(self, expected: Iterable[MockTransaction]) -> None:
        """Replace the expectations and start a fresh run."""

        with self._lock:
            self._expected = list(expected)
            self._actual = []
            self._cursor = 0
            logger.debug("Loaded %d expectations", len(self._expected))

    def peek_expected(self) -> MockTransaction:
        """Expectation at the cursor, or ``NO_EXPECTATION`` past the end."""

        with self._lock:
            if self._cursor < len(self._expected):
                return self._expected[self._cursor]
            return NO_EXPECTATION

    def record_and_advance(self, record: MockTransaction) -> None:
        with self._lock:
            if self.trace:
                want = (
                    self._expected[self._cursor]
                    if self._cursor < len(self._expected)
                    else NO_EXPECTATION
                )
                logger.debug(
                    "[%d] %s %s",
                    self._cursor,
                    "ok" if want == record else "MISMATCH",
                    record,
                )
            self._actual.append(record)
            self._cursor += 1

    def verify(self) -> None:
        """Compare expected and recorded calls.

        Raises:
            VerificationError: if the sequences differ in length or content.
        """

        with self._lock:
            expected = tuple(self._expected)
            actual = tuple(self._actual)

        index = first_divergence(expected, actual)
        if index is None:
            logger.debug("Verified %d transactions", len(actual))
            return

        raise VerificationError(
            format_report(expected, actual, index),
            index=index,
            expected=expected,
            actual=actual,
        )

    @property
    def cursor(self) -> int:
        with self._lock:
            return self._cursor

    @property
    def expected(self) -> Tuple[MockTransaction, ...]:
        with self._lock:
            return tuple(self._expected)

    @property
    def actual(self) -> Tuple[MockTransaction, ...]:
        with self._lock:
            return tuple(self._actual)

    @property
    def remaining(self) -> Tuple[MockTransaction, ...]:
        """Expectations the cursor has not reached yet."""

        with self._lock:
            return tuple(self._expected[self._cursor :])


__all__ = ["Ledger", "first_divergence", "format_report"]
