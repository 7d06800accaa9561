from __future__ import annotations

from dataclasses import dataclass
import os


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().casefold()
    return normalized not in {"0", "false", "off", ""}


@dataclass(frozen=True)
class MockConfig:
    # Log every recorded call at DEBUG level.
    trace: bool = False
    # Verify when a ``with Mock()`` block exits cleanly.
    verify_on_exit: bool = True


def load_mock_config() -> MockConfig:
    return MockConfig(
        trace=_env_flag("PERIPHMOCK_TRACE", default=False),
        verify_on_exit=_env_flag("PERIPHMOCK_VERIFY_ON_EXIT", default=True),
    )


__all__ = ["MockConfig", "load_mock_config"]
