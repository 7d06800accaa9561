"""Operation records compared by the mock ledger.

Every intercepted call is captured as one immutable ``MockTransaction``.
Expected and actual sequences are built from the same classes, so verifying a
test run is plain structural equality: records of different kinds never
compare equal, and byte payloads are stored as ``bytes`` copies.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import ClassVar, Iterable, Optional, Tuple

from .types import PinState


def _hex(data: bytes) -> str:
    return " ".join(f"{b:02X}" for b in data) or "-"


def _freeze(record: object, name: str) -> None:
    object.__setattr__(record, name, bytes(getattr(record, name)))


@dataclass(frozen=True)
class MockExec:
    """Sub-record of a composite exec call."""

    kind: ClassVar[str] = "exec"
    data: bytes = b""

    def __post_init__(self) -> None:
        _freeze(self, "data")

    def __str__(self) -> str:
        return f"{self.kind}[{_hex(self.data)}]"


@dataclass(frozen=True)
class ExecWrite(MockExec):
    kind: ClassVar[str] = "write"


@dataclass(frozen=True)
class ExecRead(MockExec):
    kind: ClassVar[str] = "read"


@dataclass(frozen=True)
class MockTransaction:
    """Base of every operation record."""

    kind: ClassVar[str] = "transaction"

    @property
    def identity(self) -> Optional[int]:
        """Handle identity the record belongs to, ``None`` for delays."""

        return getattr(self, "id", None)

    def __str__(self) -> str:
        parts = []
        for field in fields(self):
            value = getattr(self, field.name)
            if isinstance(value, bytes):
                rendered = _hex(value)
            elif isinstance(value, PinState):
                rendered = value.name
            elif isinstance(value, tuple):
                rendered = ", ".join(str(v) for v in value)
            else:
                rendered = str(value)
            parts.append(f"{field.name}={rendered}")
        return f"{self.kind}({', '.join(parts)})"


@dataclass(frozen=True)
class NoExpectation(MockTransaction):
    """Sentinel returned when the cursor is past the end of the expectations."""

    kind: ClassVar[str] = "none"


NO_EXPECTATION = NoExpectation()


@dataclass(frozen=True)
class SpiWrite(MockTransaction):
    kind: ClassVar[str] = "spi_write"
    id: int
    prefix: bytes
    data: bytes

    def __post_init__(self) -> None:
        _freeze(self, "prefix")
        _freeze(self, "data")


@dataclass(frozen=True)
class SpiRead(MockTransaction):
    kind: ClassVar[str] = "spi_read"
    id: int
    prefix: bytes
    data: bytes

    def __post_init__(self) -> None:
        _freeze(self, "prefix")
        _freeze(self, "data")


@dataclass(frozen=True)
class SpiExec(MockTransaction):
    kind: ClassVar[str] = "spi_exec"
    id: int
    ops: Tuple[MockExec, ...]

    def __init__(self, id: int, ops: Iterable[MockExec]) -> None:
        object.__setattr__(self, "id", id)
        object.__setattr__(self, "ops", tuple(ops))


@dataclass(frozen=True)
class Busy(MockTransaction):
    kind: ClassVar[str] = "busy"
    id: int
    state: PinState


@dataclass(frozen=True)
class Ready(MockTransaction):
    kind: ClassVar[str] = "ready"
    id: int
    state: PinState


@dataclass(frozen=True)
class Reset(MockTransaction):
    kind: ClassVar[str] = "reset"
    id: int
    state: PinState


@dataclass(frozen=True)
class Write(MockTransaction):
    kind: ClassVar[str] = "write"
    id: int
    data: bytes

    def __post_init__(self) -> None:
        _freeze(self, "data")


@dataclass(frozen=True)
class Transfer(MockTransaction):
    kind: ClassVar[str] = "transfer"
    id: int
    outgoing: bytes
    incoming: bytes

    def __post_init__(self) -> None:
        _freeze(self, "outgoing")
        _freeze(self, "incoming")


@dataclass(frozen=True)
class IsHigh(MockTransaction):
    kind: ClassVar[str] = "is_high"
    id: int
    value: bool


@dataclass(frozen=True)
class IsLow(MockTransaction):
    kind: ClassVar[str] = "is_low"
    id: int
    value: bool


@dataclass(frozen=True)
class SetHigh(MockTransaction):
    kind: ClassVar[str] = "set_high"
    id: int


@dataclass(frozen=True)
class SetLow(MockTransaction):
    kind: ClassVar[str] = "set_low"
    id: int


# Delays are not tied to a handle identity.
@dataclass(frozen=True)
class DelayMs(MockTransaction):
    kind: ClassVar[str] = "delay_ms"
    ms: int


@dataclass(frozen=True)
class DelayUs(MockTransaction):
    kind: ClassVar[str] = "delay_us"
    us: int


__all__ = [
    "MockExec",
    "ExecWrite",
    "ExecRead",
    "MockTransaction",
    "NoExpectation",
    "NO_EXPECTATION",
    "SpiWrite",
    "SpiRead",
    "SpiExec",
    "Busy",
    "Ready",
    "Reset",
    "Write",
    "Transfer",
    "IsHigh",
    "IsLow",
    "SetHigh",
    "SetLow",
    "DelayMs",
    "DelayUs",
]
