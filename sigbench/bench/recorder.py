"""Round execution and per-operation timing.

One routine serves both benchmark phases. Warmup calls it without a sink and
throws the returned series away; the measured phase attaches the CSV sink and
keeps the series for the statistics.

Usage:
    from sigbench.bench.recorder import measure_rounds

    measure_rounds(signer, 10, inputs)                    # warmup
    series = measure_rounds(signer, 1000, inputs, sink)   # measured
"""

import time
from collections.abc import Callable, Sequence
from typing import Protocol

from sigbench.errors import ConfigurationError
from sigbench.models.constants import Phase
from sigbench.signature.signer import Signer
from sigbench.utils.logger import Logger

Clock = Callable[[], int]
ProgressCallback = Callable[[int, int], None]


class ResultSink(Protocol):
    """Destination for per-round results of the measured phase."""

    def write_round(self, round_start: int, op_average: int) -> None:
        """Record one round: its start timestamp and mean op duration (ns)."""
        ...


def measure_rounds(
    signer: Signer,
    num_rounds: int,
    inputs: Sequence[bytes],
    sink: ResultSink | None = None,
    progress: ProgressCallback | None = None,
    clock: Clock = time.perf_counter_ns,
    phase: Phase = Phase.MEASURED,
) -> list[int]:
    """Run num_rounds rounds, signing every input once per round.

    Each signing call is timed on its own and the durations are summed per
    round. The round's result is the summed duration divided by the number of
    operations, truncated toward zero, so it never exceeds the true mean.

    Args:
        signer: Signing capability under test.
        num_rounds: Number of rounds to execute.
        inputs: Messages to sign, in order, once per round.
        sink: Receives ``(round_start, op_average)`` after each round.
        progress: Called with ``(round, num_rounds)`` after each round.
        clock: Monotonic nanosecond clock.
        phase: Phase label used in log messages.

    Returns:
        Per-round mean operation durations in nanoseconds, in round order.

    Raises:
        ConfigurationError: If inputs is empty or num_rounds is negative.
        SigningError: If any signing call fails. The run is not resumed.
    """
    ops_per_round = len(inputs)
    if ops_per_round < 1:
        raise ConfigurationError("at least one input per round is required")
    if num_rounds < 0:
        raise ConfigurationError(f"num_rounds must be >= 0, got {num_rounds}")

    Logger.ensure_configured()
    log = Logger.get("bench.recorder")
    log.info(f"Starting {phase} phase: {num_rounds} rounds x {ops_per_round} ops")

    results: list[int] = []
    sign = signer.sign

    for round_number in range(1, num_rounds + 1):
        round_duration = 0
        round_start = clock()

        for data in inputs:
            op_start = clock()
            sign(data)
            op_end = clock()
            round_duration += op_end - op_start

        op_average = round_duration // ops_per_round

        if sink is not None:
            sink.write_round(round_start, op_average)
        results.append(op_average)

        log.debug(f"{phase} round {round_number}/{num_rounds}: {op_average} ns/op")
        if progress is not None:
            progress(round_number, num_rounds)

    log.info(f"Finished {phase} phase")
    return results
