"""Call-sequence mocks for SPI buses, digital lines, and delays."""

from . import builders
from .config import MockConfig, load_mock_config
from .errors import PeripheralError, PinError, TransferError, VerificationError
from .handles import Delay, Pin, Spi
from .ledger import Ledger
from .mock import Mock
from .transactions import (
    NO_EXPECTATION,
    Busy,
    DelayMs,
    DelayUs,
    ExecRead,
    ExecWrite,
    IsHigh,
    IsLow,
    MockExec,
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
from .types import PinState, Transaction

__all__ = [
    "builders",
    "MockConfig",
    "load_mock_config",
    "PeripheralError",
    "PinError",
    "TransferError",
    "VerificationError",
    "Delay",
    "Pin",
    "Spi",
    "Ledger",
    "Mock",
    "NO_EXPECTATION",
    "Busy",
    "DelayMs",
    "DelayUs",
    "ExecRead",
    "ExecWrite",
    "IsHigh",
    "IsLow",
    "MockExec",
    "MockTransaction",
    "Ready",
    "Reset",
    "SetHigh",
    "SetLow",
    "SpiExec",
    "SpiRead",
    "SpiWrite",
    "Transfer",
    "Write",
    "PinState",
    "Transaction",
]
