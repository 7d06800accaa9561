"""Mock peripheral handles.

Each handle carries an identity minted by the ``Mock`` controller and a shared
reference to its ledger. Every call runs as one ledger transaction: look at the
expectation under the cursor, use its canned payload if it is the same kind of
call on the same handle (otherwise fall back to a default), record what really
happened, advance. Calls always succeed; mismatches surface in ``verify``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import MutableSequence, Optional, Type, TypeVar

from .ledger import Ledger
from .transactions import (
    Busy,
    DelayMs,
    DelayUs,
    ExecRead,
    ExecWrite,
    IsHigh,
    IsLow,
    MockTransaction,
    Ready,
    Reset,
    SetHigh,
    SetLow,
    SpiExec,
    SpiRead,
    SpiWrite,
    Transfer,
    Write,
)
from .types import BytesLike, PinState, Transaction

T = TypeVar("T", bound=MockTransaction)


@dataclass(frozen=True)
class _Handle:
    id: int
    ledger: Ledger = field(repr=False)

    def _expected(self, cls: Type[T]) -> Optional[T]:
        """Queued expectation if it is a ``cls`` call on this handle."""

        want = self.ledger.peek_expected()
        if type(want) is cls and want.identity == self.id:
            return want  # type: ignore[return-value]
        return None


class _Delays:
    ledger: Ledger

    def delay_ms(self, ms: int) -> None:
        """Record a millisecond delay. Nothing is slept."""

        self.ledger.record_and_advance(DelayMs(int(ms)))

    def delay_us(self, us: int) -> None:
        self.ledger.record_and_advance(DelayUs(int(us)))


@dataclass(frozen=True)
class Spi(_Handle, _Delays):
    """Mock bus handle with busy/ready/reset status lines."""

    def spi_write(self, prefix: BytesLike, data: BytesLike) -> None:
        self.ledger.record_and_advance(SpiWrite(self.id, bytes(prefix), bytes(data)))

    def spi_read(self, prefix: BytesLike, data: bytearray) -> None:
        """Fill ``data`` from a queued read of the same length."""

        with self.ledger.transaction() as ledger:
            want = self._expected(SpiRead)
            if want is not None and len(want.data) == len(data):
                data[:] = want.data
            ledger.record_and_advance(SpiRead(self.id, bytes(prefix), bytes(data)))

    def spi_exec(self, transactions: MutableSequence[Transaction]) -> None:
        """Run a batch of reads and writes as a single recorded call.

        Read requests are filled from the positionally matching ``ExecRead``
        step of a queued ``SpiExec`` on this handle. The cursor advances once
        for the whole batch.
        """

        with self.ledger.transaction() as ledger:
            want = self._expected(SpiExec)
            canned = want.ops if want is not None else ()
            for pos, request in enumerate(transactions):
                if not request.is_read or pos >= len(canned):
                    continue
                step = canned[pos]
                if type(step) is ExecRead and len(step.data) == len(request.data):
                    request.data[:] = step.data

            ops = [
                ExecRead(bytes(request.data))
                if request.is_read
                else ExecWrite(bytes(request.data))
                for request in transactions
            ]
            ledger.record_and_advance(SpiExec(self.id, ops))

    def write(self, data: BytesLike) -> None:
        self.ledger.record_and_advance(Write(self.id, bytes(data)))

    def transfer(self, data: bytearray) -> bytearray:
        """Full-duplex transfer; ``data`` is overwritten with incoming bytes."""

        with self.ledger.transaction() as ledger:
            outgoing = bytes(data)
            want = self._expected(Transfer)
            if want is not None and len(want.incoming) == len(data):
                data[:] = want.incoming
            ledger.record_and_advance(Transfer(self.id, outgoing, bytes(data)))
        return data

    def get_busy(self) -> PinState:
        with self.ledger.transaction() as ledger:
            want = self._expected(Busy)
            state = want.state if want is not None else PinState.LOW
            ledger.record_and_advance(Busy(self.id, state))
        return state

    def get_ready(self) -> PinState:
        with self.ledger.transaction() as ledger:
            want = self._expected(Ready)
            state = want.state if want is not None else PinState.LOW
            ledger.record_and_advance(Ready(self.id, state))
        return state

    def set_reset(self, state: PinState) -> None:
        self.ledger.record_and_advance(Reset(self.id, state))


@dataclass(frozen=True)
class Pin(_Handle):
    """Mock digital line."""

    def is_high(self) -> bool:
        with self.ledger.transaction() as ledger:
            want = self._expected(IsHigh)
            value = want.value if want is not None else False
            ledger.record_and_advance(IsHigh(self.id, value))
        return value

    def is_low(self) -> bool:
        with self.ledger.transaction() as ledger:
            want = self._expected(IsLow)
            value = want.value if want is not None else False
            ledger.record_and_advance(IsLow(self.id, value))
        return value

    def set_high(self) -> None:
        self.ledger.record_and_advance(SetHigh(self.id))

    def set_low(self) -> None:
        self.ledger.record_and_advance(SetLow(self.id))


@dataclass(frozen=True)
class Delay(_Handle, _Delays):
    """Mock delay provider. Its records carry no identity."""


__all__ = ["Spi", "Pin", "Delay"]
