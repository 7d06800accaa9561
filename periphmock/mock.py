"""Mock controller: owns the ledger and mints handles."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Iterable, Optional, Tuple, Type

from .config import MockConfig, load_mock_config
from .handles import Delay, Pin, Spi
from .ledger import Ledger
from .transactions import MockTransaction

logger = logging.getLogger(__name__)


class Mock:
    """Base mock type.

    Handles created from one controller share its ledger and get sequential
    identities (starting at 0) regardless of their kind::

        mock = Mock()
        spi = mock.spi()
        mock.expect([builders.spi_read(spi, [0xFF], [0xAA, 0xBB])])
        driver_under_test(spi)
        mock.verify()
    """

    def __init__(self, config: Optional[MockConfig] = None) -> None:
        self.config = config or load_mock_config()
        self._ledger = Ledger(trace=self.config.trace)
        self._count = 0

    @property
    def ledger(self) -> Ledger:
        return self._ledger

    def _next_id(self) -> int:
        handle_id = self._count
        self._count += 1
        return handle_id

    def expect(self, transactions: Iterable[MockTransaction]) -> None:
        """Load a fresh expectation sequence, discarding earlier calls."""

        self._ledger.load(transactions)

    def spi(self) -> Spi:
        return Spi(self._next_id(), self._ledger)

    def pin(self) -> Pin:
        return Pin(self._next_id(), self._ledger)

    def delay(self) -> Delay:
        return Delay(self._next_id(), self._ledger)

    def verify(self) -> None:
        """Check recorded calls against the expectations.

        Raises:
            VerificationError: on any length or content mismatch.
        """

        self._ledger.verify()

    finalise = verify

    @property
    def cursor(self) -> int:
        return self._ledger.cursor

    def actual(self) -> Tuple[MockTransaction, ...]:
        return self._ledger.actual

    def __enter__(self) -> "Mock":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if exc_type is not None:
            logger.debug("Skipping verification after %s", exc_type.__name__)
            return
        if self.config.verify_on_exit:
            self.verify()


__all__ = ["Mock"]
