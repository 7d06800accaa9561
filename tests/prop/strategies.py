"""Hypothesis strategies producing scripted handle calls.

A script is a list of ``Step`` values. Replaying a step issues the real call on
a mock handle; ``expectation`` builds the record the same call should produce,
so a script yields both sides of a matching run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from hypothesis import strategies as st

from periphmock import builders
from periphmock.handles import Delay, Pin, Spi
from periphmock.transactions import MockTransaction
from periphmock.types import PinState, Transaction

HANDLE_SLOTS = 3

payloads = st.binary(min_size=0, max_size=8)
levels = st.sampled_from([PinState.LOW, PinState.HIGH])


@dataclass(frozen=True)
class Handles:
    spis: Tuple[Spi, ...]
    pins: Tuple[Pin, ...]
    delay: Delay


@dataclass(frozen=True)
class Step:
    name: str
    slot: int
    args: Tuple[object, ...]

    def expectation(self, handles: Handles) -> MockTransaction:
        return _EXPECT[self.name](handles, self)

    def replay(self, handles: Handles) -> object:
        return _REPLAY[self.name](handles, self)


def _spi(handles: Handles, step: Step) -> Spi:
    return handles.spis[step.slot % len(handles.spis)]


def _pin(handles: Handles, step: Step) -> Pin:
    return handles.pins[step.slot % len(handles.pins)]


def _exec_ops(args: Sequence[object]):
    return [
        builders.exec_read(data) if is_read else builders.exec_write(data)
        for is_read, data in args
    ]


def _replay_exec(spi: Spi, args: Sequence[object]) -> List[bytes]:
    requests = [
        Transaction.read(len(data)) if is_read else Transaction.write(data)
        for is_read, data in args
    ]
    spi.spi_exec(requests)
    return [bytes(request.data) for request in requests]


def _replay_read(spi: Spi, prefix: bytes, data: bytes) -> bytes:
    buf = bytearray(len(data))
    spi.spi_read(prefix, buf)
    return bytes(buf)


def _replay_transfer(spi: Spi, outgoing: bytes) -> bytes:
    return bytes(spi.transfer(bytearray(outgoing)))


_EXPECT: dict = {
    "spi_write": lambda h, s: builders.spi_write(_spi(h, s), *s.args),
    "spi_read": lambda h, s: builders.spi_read(_spi(h, s), *s.args),
    "spi_exec": lambda h, s: builders.spi_exec(_spi(h, s), _exec_ops(s.args)),
    "write": lambda h, s: builders.write(_spi(h, s), *s.args),
    "transfer": lambda h, s: builders.transfer(_spi(h, s), *s.args),
    "busy": lambda h, s: builders.busy(_spi(h, s), *s.args),
    "ready": lambda h, s: builders.ready(_spi(h, s), *s.args),
    "reset": lambda h, s: builders.reset(_spi(h, s), *s.args),
    "is_high": lambda h, s: builders.is_high(_pin(h, s), *s.args),
    "is_low": lambda h, s: builders.is_low(_pin(h, s), *s.args),
    "set_high": lambda h, s: builders.set_high(_pin(h, s)),
    "set_low": lambda h, s: builders.set_low(_pin(h, s)),
    "delay_ms": lambda h, s: builders.delay_ms(*s.args),
}

_REPLAY: dict = {
    "spi_write": lambda h, s: _spi(h, s).spi_write(*s.args),
    "spi_read": lambda h, s: _replay_read(_spi(h, s), *s.args),
    "spi_exec": lambda h, s: _replay_exec(_spi(h, s), s.args),
    "write": lambda h, s: _spi(h, s).write(*s.args),
    "transfer": lambda h, s: _replay_transfer(_spi(h, s), s.args[0]),
    "busy": lambda h, s: _spi(h, s).get_busy(),
    "ready": lambda h, s: _spi(h, s).get_ready(),
    "reset": lambda h, s: _spi(h, s).set_reset(*s.args),
    "is_high": lambda h, s: _pin(h, s).is_high(),
    "is_low": lambda h, s: _pin(h, s).is_low(),
    "set_high": lambda h, s: _pin(h, s).set_high(),
    "set_low": lambda h, s: _pin(h, s).set_low(),
    "delay_ms": lambda h, s: h.delay.delay_ms(*s.args),
}


def _step(name: str, args: st.SearchStrategy) -> st.SearchStrategy:
    return st.builds(
        Step, name=st.just(name), slot=st.integers(0, HANDLE_SLOTS - 1), args=args
    )


def _same_length_pair(data: bytes) -> st.SearchStrategy:
    return st.binary(min_size=len(data), max_size=len(data)).map(
        lambda incoming: (data, incoming)
    )


exec_args = st.lists(st.tuples(st.booleans(), payloads), min_size=0, max_size=4).map(
    tuple
)

steps: st.SearchStrategy = st.one_of(
    _step("spi_write", st.tuples(payloads, payloads)),
    _step("spi_read", st.tuples(payloads, payloads)),
    _step("spi_exec", exec_args),
    _step("write", st.tuples(payloads)),
    _step("transfer", payloads.flatmap(_same_length_pair)),
    _step("busy", st.tuples(levels)),
    _step("ready", st.tuples(levels)),
    _step("reset", st.tuples(levels)),
    _step("is_high", st.tuples(st.booleans())),
    _step("is_low", st.tuples(st.booleans())),
    _step("set_high", st.just(())),
    _step("set_low", st.just(())),
    _step("delay_ms", st.tuples(st.integers(0, 1000))),
)

scripts = st.lists(steps, min_size=0, max_size=20)


def make_handles(spi: Callable[[], Spi], pin: Callable[[], Pin], delay: Delay) -> Handles:
    return Handles(
        spis=tuple(spi() for _ in range(HANDLE_SLOTS)),
        pins=tuple(pin() for _ in range(HANDLE_SLOTS)),
        delay=delay,
    )


__all__ = ["Handles", "Step", "make_handles", "scripts", "steps"]
