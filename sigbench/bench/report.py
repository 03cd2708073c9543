"""Raw results file, console rendering and summary export.

The raw results file is the benchmark's primary artifact: a two-column CSV
time series with one row per measured round.

    roundStartTime,opAverageDurationInRound
    81234567890123,52311
    81234620455870,52187

Usage:
    from sigbench.bench.report import CsvResultSink, SummaryReport

    with CsvResultSink.open("results.csv") as sink:
        series = measure_rounds(signer, 1000, inputs, sink)

    report = SummaryReport(config)
    report.set_summary(summarize(series))
    report.emit("summary.json")
"""

import csv
import json
import os
import platform
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from enum import Enum
from io import StringIO
from pathlib import Path
from typing import TextIO

import cryptography
import yaml

from sigbench.bench.stats import round_half_up
from sigbench.errors import ConfigurationError, ReportFormatError, ReportWriteError
from sigbench.models.benchmark_models import (
    BenchmarkConfig,
    BenchmarkExport,
    BenchmarkSummary,
    RunMetadata,
)
from sigbench.models.constants import CSV_HEADER, PROGRESS_BAR_WIDTH
from sigbench.version import SIGBENCH_VERSION

# =============================================================================
# Raw results (CSV)
# =============================================================================


class CsvResultSink:
    """Writes per-round results as CSV rows, header first."""

    def __init__(self, stream: TextIO, name: str = "<stream>") -> None:
        """Wrap stream and write the header row.

        Args:
            stream: Text stream opened with ``newline=""``.
            name: Destination name used in error messages.
        """
        self.name = name
        self.rows_written = 0
        self._writer = csv.writer(stream, lineterminator="\n")
        self._write(CSV_HEADER)

    @classmethod
    @contextmanager
    def open(cls, path: str | Path) -> Iterator["CsvResultSink"]:
        """Open path for writing and yield a sink bound to it.

        Raises:
            ConfigurationError: If the file cannot be created.
            ReportWriteError: If writing or closing the file fails.
        """
        try:
            stream = open(path, "w", encoding="utf-8", newline="")
        except OSError as e:
            raise ConfigurationError(f"Cannot open results file {path}: {e}") from e

        try:
            yield cls(stream, str(path))
        finally:
            # Rows convert their own errors; only the final flush is left
            try:
                stream.close()
            except OSError as e:
                raise ReportWriteError(str(path), str(e)) from e

    def write_round(self, round_start: int, op_average: int) -> None:
        """Append one round's row."""
        self._write((round_start, op_average))
        self.rows_written += 1

    def _write(self, row: tuple[object, object]) -> None:
        try:
            self._writer.writerow(row)
        except OSError as e:
            raise ReportWriteError(self.name, str(e)) from e


def read_results(source: str | Path | TextIO) -> list[tuple[int, int]]:
    """Parse a raw results file back into (round start, op average) pairs.

    Args:
        source: Path to the CSV file or an open text stream.

    Returns:
        Rows in file order.

    Raises:
        ReportFormatError: If the header is missing or a row is malformed.
    """
    if isinstance(source, str | Path):
        with open(source, encoding="utf-8", newline="") as f:
            return read_results(f)

    reader = csv.reader(source)
    header = next(reader, None)
    if header is None or tuple(header) != CSV_HEADER:
        raise ReportFormatError(f"Expected header {','.join(CSV_HEADER)}, got {header}")

    rows: list[tuple[int, int]] = []
    for line_number, row in enumerate(reader, start=2):
        if not row:
            continue
        if len(row) != 2:
            raise ReportFormatError(f"Line {line_number}: expected 2 columns, got {len(row)}")
        try:
            rows.append((int(row[0]), int(row[1])))
        except ValueError as e:
            raise ReportFormatError(f"Line {line_number}: {e}") from e
    return rows


# =============================================================================
# Console
# =============================================================================


def render_progress(round_number: int, num_rounds: int) -> str:
    """Render a fixed-width progress bar with the completion percentage.

    The bar holds one "#" per two percent, e.g. 25% renders 12 of 50 cells
    followed by " 25.0%".
    """
    percent = round_number / num_rounds * 100
    bar = "#" * (round_half_up(percent) // 2)
    return f"[{bar:<{PROGRESS_BAR_WIDTH}}] {percent:5.1f}%"


def format_summary(summary: BenchmarkSummary) -> str:
    """Format the five summary statistics for the console."""
    return "\n".join(
        [
            "Basic analysis:",
            f"- Median operation time: {summary.median_ns} ns",
            f"- Mean operation time: {summary.mean_ns} ns",
            f"- Operation time stddev: {summary.stddev_ns} ns",
            f"- Median operations per second: {summary.median_ops_per_sec}",
            f"- Mean operations per second: {summary.mean_ops_per_sec}",
        ]
    )


# =============================================================================
# Summary export
# =============================================================================


class OutputFormat(Enum):
    """Supported formats for the summary export."""

    JSON = "json"
    YAML = "yaml"
    TEXT = "text"

    @classmethod
    def from_path(cls, path: str | Path) -> "OutputFormat":
        """Pick a format from a file suffix; unknown suffixes get JSON."""
        suffix = Path(path).suffix.lower()
        if suffix in (".yaml", ".yml"):
            return cls.YAML
        if suffix == ".txt":
            return cls.TEXT
        return cls.JSON


class SummaryReport:
    """Run metadata, configuration and summary of one benchmark run.

    Example:
        >>> report = SummaryReport(config)
        >>> report.set_summary(summary)
        >>> report.emit("summary.yaml")
    """

    def __init__(self, config: BenchmarkConfig) -> None:
        """Start a report; the start timestamp is taken now."""
        self.config = config
        self.summary: BenchmarkSummary | None = None
        self._metadata = RunMetadata(
            timestamp_start=datetime.now(timezone.utc).isoformat(),
            sigbench_version=str(SIGBENCH_VERSION),
            sigbench_hash=SIGBENCH_VERSION.hash_short(),
            python_version=platform.python_version(),
            platform=platform.platform(),
            cryptography_version=cryptography.__version__,
        )

    def check_destination(self, output: str | Path) -> Path:
        """Verify output can take the export, before the benchmark runs.

        Raises:
            ConfigurationError: If output is the results file, a directory, or
                lies in a directory that is missing or not writable.
        """
        path = Path(output)
        if path.resolve() == self.config.output.resolve():
            raise ConfigurationError(
                f"Summary output {output} would overwrite the results file"
            )
        if path.is_dir():
            raise ConfigurationError(f"Cannot write summary to {output}: is a directory")

        parent = path.parent
        if not parent.is_dir():
            raise ConfigurationError(
                f"Cannot write summary to {output}: directory {parent} does not exist"
            )
        if not os.access(parent, os.W_OK) or (path.exists() and not os.access(path, os.W_OK)):
            raise ConfigurationError(f"Cannot write summary to {output}: permission denied")
        return path

    def set_summary(self, summary: BenchmarkSummary) -> None:
        """Attach the summary statistics of the measured phase."""
        self.summary = summary

    def finalize(self) -> None:
        """Mark the report complete, setting the end timestamp."""
        self._metadata = self._metadata.model_copy(
            update={"timestamp_end": datetime.now(timezone.utc).isoformat()}
        )

    def to_export(self) -> BenchmarkExport:
        """Build the export model.

        Raises:
            ValueError: If no summary has been attached.
        """
        if self.summary is None:
            raise ValueError("Summary not set. Call set_summary() first.")
        return BenchmarkExport(
            metadata=self._metadata, config=self.config, summary=self.summary
        )

    def emit(
        self,
        output: str | Path | TextIO,
        format: OutputFormat | None = None,
        indent: int = 2,
    ) -> None:
        """Write the report to a file or stream.

        Args:
            output: File path or file-like object (e.g., sys.stdout).
            format: Output format; inferred from the file suffix when None
                (JSON for streams).
            indent: Indentation level for JSON/YAML.

        Raises:
            ReportWriteError: If the destination cannot be written.
        """
        if self._metadata.timestamp_end is None:
            self.finalize()

        if format is None:
            format = (
                OutputFormat.from_path(output)
                if isinstance(output, str | Path)
                else OutputFormat.JSON
            )

        data = self.to_export().model_dump(mode="json")
        if format == OutputFormat.JSON:
            content = json.dumps(data, indent=indent) + "\n"
        elif format == OutputFormat.YAML:
            content = yaml.safe_dump(data, indent=indent, sort_keys=False)
        else:
            content = self._to_text()

        self._write_output(output, content)

    def _to_text(self) -> str:
        export = self.to_export()
        output = StringIO()
        output.write("=" * 60 + "\n")
        output.write("  SIGBENCH SIGNATURE BENCHMARK\n")
        output.write("=" * 60 + "\n\n")
        output.write(f"Started:   {export.metadata.timestamp_start}\n")
        output.write(f"Finished:  {export.metadata.timestamp_end}\n")
        output.write(f"Version:   {export.metadata.sigbench_version}\n")
        output.write(f"Library:   cryptography {export.metadata.cryptography_version}\n\n")
        output.write("-" * 40 + "\n")
        output.write(f"Algorithm:     {export.config.algorithm}\n")
        output.write(f"Rounds:        {export.config.rounds}\n")
        output.write(f"Ops per round: {export.config.ops_per_round}\n")
        output.write(f"Data size:     {export.config.data_size} bytes\n")
        output.write("-" * 40 + "\n\n")
        output.write(format_summary(export.summary) + "\n")
        return output.getvalue()

    def _write_output(self, output: str | Path | TextIO, content: str) -> None:
        if isinstance(output, str | Path):
            try:
                Path(output).write_text(content, encoding="utf-8")
            except OSError as e:
                raise ReportWriteError(str(output), str(e)) from e
        else:
            output.write(content)
            if output is not sys.stdout and output is not sys.stderr:
                output.flush()
