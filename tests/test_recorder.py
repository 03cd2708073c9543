"""Tests for round execution and per-operation timing."""

import pytest

from sigbench.bench.recorder import measure_rounds
from sigbench.errors import ConfigurationError, SigningError


class ListSink:
    """Collects rows the recorder emits."""

    def __init__(self) -> None:
        self.rows: list[tuple[int, int]] = []

    def write_round(self, round_start: int, op_average: int) -> None:
        self.rows.append((round_start, op_average))


def test_round_average_of_op_durations(signer, make_scripted_clock):
    """Per-op durations 10, 20, 30, 40 average to 25."""
    inputs = [b"a", b"b", b"c", b"d"]
    clock = make_scripted_clock([[10, 20, 30, 40]])

    series = measure_rounds(signer, 1, inputs, clock=clock)

    assert series == [25]


def test_round_average_truncates(signer, make_scripted_clock):
    """Integer division truncates: 4 ns over 3 ops is 1 ns, not 1.33."""
    clock = make_scripted_clock([[1, 1, 2]])

    assert measure_rounds(signer, 1, [b"x", b"y", b"z"], clock=clock) == [1]


def test_signs_every_input_every_round(signer, make_steady_clock):
    """N rounds of M inputs invoke the signer N x M times, in input order."""
    inputs = [b"m0", b"m1", b"m2"]

    series = measure_rounds(signer, 5, inputs, clock=make_steady_clock())

    assert len(signer.calls) == 15
    assert signer.calls == inputs * 5
    assert len(series) == 5


def test_sink_receives_round_start_and_average(signer, make_scripted_clock):
    """Each round emits (round start, average) to the sink in order."""
    sink = ListSink()
    clock = make_scripted_clock([[10, 10], [30, 50]], gap=1000)

    series = measure_rounds(signer, 2, [b"a", b"b"], sink=sink, clock=clock)

    assert series == [10, 40]
    assert sink.rows == [(0, 10), (1020, 40)]


def test_without_sink_series_is_still_returned(signer, make_steady_clock):
    """Warmup-style runs without a sink still compute every round."""
    series = measure_rounds(signer, 3, [b"a"], clock=make_steady_clock(step=7))
    assert series == [7, 7, 7]


def test_progress_reported_after_each_round(signer, make_steady_clock):
    """Progress callback sees every round number with the total."""
    seen: list[tuple[int, int]] = []

    measure_rounds(
        signer,
        4,
        [b"a"],
        progress=lambda r, n: seen.append((r, n)),
        clock=make_steady_clock(),
    )

    assert seen == [(1, 4), (2, 4), (3, 4), (4, 4)]


def test_zero_rounds_returns_empty_series(signer, make_steady_clock):
    """Zero warmup rounds is valid and signs nothing."""
    assert measure_rounds(signer, 0, [b"a"], clock=make_steady_clock()) == []
    assert signer.calls == []


def test_empty_inputs_rejected(signer, make_steady_clock):
    """An empty input set would divide by zero."""
    with pytest.raises(ConfigurationError):
        measure_rounds(signer, 1, [], clock=make_steady_clock())


def test_signing_failure_aborts_run(make_signer, make_steady_clock):
    """A failing signature call stops the run without emitting the round."""
    signer = make_signer(fail_on_call=3)
    sink = ListSink()

    with pytest.raises(SigningError):
        measure_rounds(signer, 5, [b"a", b"b"], sink=sink, clock=make_steady_clock())

    assert sink.rows == [(10, 10)]
    assert len(signer.calls) == 3
