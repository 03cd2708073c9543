"""Signature benchmark core.

This module provides:
- generate_inputs: the message set signed in every round
- measure_rounds: round execution with per-operation timing
- summarize: median, geometric mean, stddev and throughput
- CsvResultSink / SummaryReport: raw CSV results and summary export
- SignatureBenchmark: the driver tying it together

Quick Start:
    from sigbench.bench import SignatureBenchmark
    from sigbench.models import BenchmarkConfig

    outcome = SignatureBenchmark(BenchmarkConfig.build(rounds=100)).run()
"""

from sigbench.bench.driver import BenchmarkOutcome, SignatureBenchmark
from sigbench.bench.inputs import generate_inputs
from sigbench.bench.recorder import ResultSink, measure_rounds
from sigbench.bench.report import (
    CsvResultSink,
    OutputFormat,
    SummaryReport,
    format_summary,
    read_results,
    render_progress,
)
from sigbench.bench.stats import (
    geometric_mean,
    median,
    ops_per_second,
    standard_deviation,
    summarize,
)

__all__ = [
    # Driver
    "BenchmarkOutcome",
    "SignatureBenchmark",
    # Recorder
    "ResultSink",
    "generate_inputs",
    "measure_rounds",
    # Report
    "CsvResultSink",
    "OutputFormat",
    "SummaryReport",
    "format_summary",
    "read_results",
    "render_progress",
    # Statistics
    "geometric_mean",
    "median",
    "ops_per_second",
    "standard_deviation",
    "summarize",
]
