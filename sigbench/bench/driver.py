"""Benchmark driver: key generation, warmup, measurement and reporting.

Usage:
    from sigbench.bench.driver import SignatureBenchmark
    from sigbench.models import BenchmarkConfig

    config = BenchmarkConfig.build(algorithm="ECDSA_P256", rounds=100)
    outcome = SignatureBenchmark(config).run()
    print(outcome.summary.median_ns)
"""

import time
from collections.abc import Callable
from dataclasses import dataclass

import click

from sigbench.bench.inputs import generate_inputs
from sigbench.bench.recorder import Clock, measure_rounds
from sigbench.bench.report import CsvResultSink, format_summary, render_progress
from sigbench.bench.stats import summarize
from sigbench.models.benchmark_models import BenchmarkConfig, BenchmarkSummary
from sigbench.models.constants import Phase
from sigbench.signature.algorithms import SignatureAlgorithm
from sigbench.signature.signer import Signer, generate_signer
from sigbench.utils.logger import Logger

SignerFactory = Callable[[SignatureAlgorithm], Signer]
Echo = Callable[[str], None]


@dataclass(frozen=True)
class BenchmarkOutcome:
    """Measured series and its summary."""

    series: tuple[int, ...]
    summary: BenchmarkSummary


class SignatureBenchmark:
    """Runs one signature benchmark described by a BenchmarkConfig.

    Any failure while generating the key or signing aborts the run; a series
    with holes in it would not be comparable to a complete one.
    """

    def __init__(
        self,
        config: BenchmarkConfig,
        signer_factory: SignerFactory = generate_signer,
        echo: Echo = click.echo,
        clock: Clock = time.perf_counter_ns,
        show_progress: bool = True,
    ) -> None:
        """Initialize the benchmark.

        Args:
            config: Validated benchmark configuration.
            signer_factory: Creates the signing capability for an algorithm.
            echo: Receives every console line (status, progress, summary).
            clock: Monotonic nanosecond clock used for all timings.
            show_progress: Print a progress line after every round.
        """
        self.config = config
        self.signer_factory = signer_factory
        self.echo = echo
        self.clock = clock
        self.show_progress = show_progress
        Logger.ensure_configured()
        self.logger = Logger.get("bench.driver")

    def _progress(self, round_number: int, num_rounds: int) -> None:
        self.echo(render_progress(round_number, num_rounds))

    def run(self) -> BenchmarkOutcome:
        """Execute warmup and measured phases and print the summary.

        Returns:
            The measured series and its summary.

        Raises:
            ConfigurationError: If the results file cannot be opened.
            SigningError: If key generation or signing fails.
            ReportWriteError: If the results file cannot be written.
            StatisticsError: If the series cannot be summarized.
        """
        config = self.config
        progress = self._progress if self.show_progress else None
        self.logger.debug(f"Benchmark configuration: {config.model_dump(mode='json')}")

        self.echo(f"Generating key of type {config.algorithm.value}")
        signer = self.signer_factory(config.algorithm)

        self.echo(f"Preparing random {config.data_size} byte inputs for signing")
        inputs = generate_inputs(config.ops_per_round, config.data_size)

        # Opened before warmup so an unwritable path fails before any timing
        with CsvResultSink.open(config.output) as sink:
            self.echo(f"Performing {config.warmup_rounds} warmup rounds")
            measure_rounds(
                signer,
                config.warmup_rounds,
                inputs,
                progress=progress,
                clock=self.clock,
                phase=Phase.WARMUP,
            )

            self.echo(
                f"Performing {config.rounds} rounds, "
                f"measuring {config.ops_per_round} ops per round"
            )
            series = measure_rounds(
                signer,
                config.rounds,
                inputs,
                sink=sink,
                progress=progress,
                clock=self.clock,
                phase=Phase.MEASURED,
            )

        self.logger.info(
            f"Wrote {sink.rows_written} rounds ({config.total_operations} signatures) "
            f"to {config.output}"
        )

        summary = summarize(series)
        self.echo(format_summary(summary))
        return BenchmarkOutcome(series=tuple(series), summary=summary)
