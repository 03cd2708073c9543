"""Shared fixtures: deterministic clocks and signers for timing tests."""

from collections.abc import Callable

import pytest

from sigbench.errors import SigningError


class RecordingSigner:
    """Signer double that records every message it is asked to sign."""

    def __init__(self, fail_on_call: int | None = None) -> None:
        self.calls: list[bytes] = []
        self.fail_on_call = fail_on_call

    def sign(self, data: bytes) -> bytes:
        self.calls.append(data)
        if self.fail_on_call is not None and len(self.calls) == self.fail_on_call:
            raise SigningError("FAKE", "primitive failed")
        return b"sig:" + data[:4]


def scripted_clock(rounds: list[list[int]], gap: int = 1000) -> Callable[[], int]:
    """Build a clock whose readings produce the given per-op durations.

    The recorder reads the clock once at the start of every round and twice
    around every operation; this replays exactly that sequence.
    """
    ticks: list[int] = []
    now = 0
    for durations in rounds:
        ticks.append(now)
        for duration in durations:
            ticks.append(now)
            now += duration
            ticks.append(now)
        now += gap
    return iter(ticks).__next__


def steady_clock(step: int = 10) -> Callable[[], int]:
    """A clock that advances by step on every reading."""
    state = {"now": 0}

    def clock() -> int:
        state["now"] += step
        return state["now"]

    return clock


@pytest.fixture
def signer() -> RecordingSigner:
    return RecordingSigner()


@pytest.fixture
def make_signer() -> type[RecordingSigner]:
    return RecordingSigner


@pytest.fixture
def make_scripted_clock() -> Callable[..., Callable[[], int]]:
    return scripted_clock


@pytest.fixture
def make_steady_clock() -> Callable[..., Callable[[], int]]:
    return steady_clock
