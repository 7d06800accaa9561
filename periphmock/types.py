"""Value types shared by the capability contracts and the mock handles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Literal, Union

BytesLike = Union[bytes, bytearray, memoryview]
TransactionKind = Literal["read", "write"]


class PinState(Enum):
    """Level of a status or control line."""

    LOW = auto()
    HIGH = auto()

    @classmethod
    def from_bool(cls, value: bool) -> "PinState":
        return cls.HIGH if value else cls.LOW

    def __bool__(self) -> bool:
        return self is PinState.HIGH


@dataclass
class Transaction:
    """One sub-request of a composite ``spi_exec`` call.

    Write requests carry the outgoing bytes. Read requests carry a mutable
    buffer whose length is the number of bytes to read; the bus fills it in
    place.
    """

    kind: TransactionKind
    data: bytearray

    @classmethod
    def write(cls, data: BytesLike) -> "Transaction":
        return cls("write", bytearray(data))

    @classmethod
    def read(cls, size_or_buffer: Union[int, bytearray]) -> "Transaction":
        if isinstance(size_or_buffer, int):
            return cls("read", bytearray(size_or_buffer))
        return cls("read", size_or_buffer)

    @property
    def is_read(self) -> bool:
        return self.kind == "read"


__all__ = ["BytesLike", "PinState", "Transaction", "TransactionKind"]
