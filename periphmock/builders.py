"""Expectation builders.

Each helper takes the handle the call is expected on plus literal values and
returns the matching record. Byte inputs are copied, so mutating a buffer after
queueing an expectation does not change the expectation.
"""

from __future__ import annotations

from typing import Iterable, Union

from .handles import Pin, Spi
from .transactions import (
    Busy,
    DelayMs,
    DelayUs,
    ExecRead,
    ExecWrite,
    IsHigh,
    IsLow,
    MockExec,
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
from .types import BytesLike, PinState

Level = Union[PinState, bool]


def _level(value: Level) -> PinState:
    if isinstance(value, PinState):
        return value
    return PinState.from_bool(value)


def spi_write(spi: Spi, prefix: BytesLike, outgoing: BytesLike) -> SpiWrite:
    return SpiWrite(spi.id, bytes(prefix), bytes(outgoing))


def spi_read(spi: Spi, prefix: BytesLike, incoming: BytesLike) -> SpiRead:
    return SpiRead(spi.id, bytes(prefix), bytes(incoming))


def exec_write(data: BytesLike) -> ExecWrite:
    return ExecWrite(bytes(data))


def exec_read(data: BytesLike) -> ExecRead:
    """Composite read step; ``data`` is what the bus hands back."""

    return ExecRead(bytes(data))


def spi_exec(spi: Spi, ops: Iterable[MockExec]) -> SpiExec:
    return SpiExec(spi.id, list(ops))


def busy(spi: Spi, value: Level) -> Busy:
    return Busy(spi.id, _level(value))


def ready(spi: Spi, value: Level) -> Ready:
    return Ready(spi.id, _level(value))


def reset(spi: Spi, value: Level) -> Reset:
    return Reset(spi.id, _level(value))


def write(spi: Spi, outgoing: BytesLike) -> Write:
    return Write(spi.id, bytes(outgoing))


def transfer(spi: Spi, outgoing: BytesLike, incoming: BytesLike) -> Transfer:
    return Transfer(spi.id, bytes(outgoing), bytes(incoming))


def is_high(pin: Pin, value: bool) -> IsHigh:
    return IsHigh(pin.id, bool(value))


def is_low(pin: Pin, value: bool) -> IsLow:
    return IsLow(pin.id, bool(value))


def set_high(pin: Pin) -> SetHigh:
    return SetHigh(pin.id)


def set_low(pin: Pin) -> SetLow:
    return SetLow(pin.id)


def delay_ms(ms: int) -> DelayMs:
    return DelayMs(int(ms))


def delay_us(us: int) -> DelayUs:
    return DelayUs(int(us))


__all__ = [
    "spi_write",
    "spi_read",
    "exec_write",
    "exec_read",
    "spi_exec",
    "busy",
    "ready",
    "reset",
    "write",
    "transfer",
    "is_high",
    "is_low",
    "set_high",
    "set_low",
    "delay_ms",
    "delay_us",
]
