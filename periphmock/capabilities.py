"""Capability contracts consumed by peripheral drivers.

Drivers are written against these protocols; in production they receive real
bus and pin objects, in tests the mock handles from ``periphmock.handles``.
Implementations signal failure by raising ``PeripheralError`` subclasses.
"""

from __future__ import annotations

from typing import MutableSequence, Protocol, runtime_checkable

from .types import BytesLike, PinState, Transaction


@runtime_checkable
class Transactional(Protocol):
    """Register-style bus access: a command prefix followed by data."""

    def spi_write(self, prefix: BytesLike, data: BytesLike) -> None: ...

    def spi_read(self, prefix: BytesLike, data: bytearray) -> None: ...

    def spi_exec(self, transactions: MutableSequence[Transaction]) -> None: ...


@runtime_checkable
class Write(Protocol):
    def write(self, data: BytesLike) -> None: ...


@runtime_checkable
class Transfer(Protocol):
    def transfer(self, data: bytearray) -> bytearray: ...


@runtime_checkable
class Busy(Protocol):
    def get_busy(self) -> PinState: ...


@runtime_checkable
class Ready(Protocol):
    def get_ready(self) -> PinState: ...


@runtime_checkable
class Reset(Protocol):
    def set_reset(self, state: PinState) -> None: ...


@runtime_checkable
class InputPin(Protocol):
    def is_high(self) -> bool: ...

    def is_low(self) -> bool: ...


@runtime_checkable
class OutputPin(Protocol):
    def set_high(self) -> None: ...

    def set_low(self) -> None: ...


@runtime_checkable
class DelayMs(Protocol):
    def delay_ms(self, ms: int) -> None: ...


@runtime_checkable
class DelayUs(Protocol):
    def delay_us(self, us: int) -> None: ...


__all__ = [
    "Transactional",
    "Write",
    "Transfer",
    "Busy",
    "Ready",
    "Reset",
    "InputPin",
    "OutputPin",
    "DelayMs",
    "DelayUs",
]
