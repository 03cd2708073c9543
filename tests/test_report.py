"""Tests for the raw results file, console output and summary export."""

import json
from io import StringIO

import pytest
import yaml

from sigbench.bench.report import (
    CsvResultSink,
    OutputFormat,
    SummaryReport,
    format_summary,
    read_results,
    render_progress,
)
from sigbench.errors import ConfigurationError, ReportFormatError, ReportWriteError
from sigbench.models import BenchmarkConfig, BenchmarkSummary


@pytest.fixture
def summary() -> BenchmarkSummary:
    return BenchmarkSummary(
        rounds=3,
        median_ns=20,
        mean_ns=18,
        stddev_ns=8,
        median_ops_per_sec=50_000_000,
        mean_ops_per_sec=55_555_556,
    )


def test_csv_header_then_rows():
    """Header line first, then one row per round."""
    stream = StringIO()
    sink = CsvResultSink(stream)
    sink.write_round(1000, 25)
    sink.write_round(2000, 30)

    assert stream.getvalue() == (
        "roundStartTime,opAverageDurationInRound\n1000,25\n2000,30\n"
    )
    assert sink.rows_written == 2


def test_csv_round_trip(tmp_path):
    """Rows written to the report parse back in the same order."""
    rows = [(81234567890123, 52311), (81234620455870, 52187), (81234672000001, 9)]
    path = tmp_path / "results.csv"

    with CsvResultSink.open(path) as sink:
        for start, average in rows:
            sink.write_round(start, average)

    assert read_results(path) == rows


def test_header_only_file_has_no_rows(tmp_path):
    """Opening a sink without rounds leaves a header-only file."""
    path = tmp_path / "empty.csv"
    with CsvResultSink.open(path):
        pass

    assert path.read_text(encoding="utf-8") == "roundStartTime,opAverageDurationInRound\n"
    assert read_results(path) == []


def test_open_unwritable_path_is_configuration_error(tmp_path):
    """A results path in a missing directory fails before any timing."""
    with pytest.raises(ConfigurationError):
        with CsvResultSink.open(tmp_path / "missing" / "results.csv"):
            pass


def test_errors_inside_block_pass_through(tmp_path):
    """Only writes to the results file become ReportWriteError."""
    with pytest.raises(OSError, match="unrelated") as excinfo:
        with CsvResultSink.open(tmp_path / "results.csv"):
            raise OSError("unrelated")

    assert not isinstance(excinfo.value, ReportWriteError)


def test_write_failure_is_report_write_error():
    """An I/O error while writing a row is fatal."""

    class BrokenStream(StringIO):
        def write(self, s):
            if "," in s and not s.startswith("round"):
                raise OSError("disk full")
            return super().write(s)

    sink = CsvResultSink(BrokenStream(), name="broken.csv")
    with pytest.raises(ReportWriteError, match="broken.csv"):
        sink.write_round(1, 2)


@pytest.mark.parametrize(
    "content",
    [
        "",
        "start,duration\n1,2\n",
        "roundStartTime,opAverageDurationInRound\n1,2,3\n",
        "roundStartTime,opAverageDurationInRound\n1,abc\n",
    ],
)
def test_read_malformed_results(content):
    """Bad headers and rows are reported, not skipped."""
    with pytest.raises(ReportFormatError):
        read_results(StringIO(content))


def test_render_progress():
    """Bar is 50 cells wide with one '#' per two percent."""
    assert render_progress(1, 4) == "[" + "#" * 12 + " " * 38 + "]  25.0%"
    assert render_progress(4, 4) == "[" + "#" * 50 + "] 100.0%"
    assert render_progress(1, 3).endswith("]  33.3%")


def test_format_summary(summary):
    """Five statistics in the fixed console layout."""
    lines = format_summary(summary).splitlines()

    assert lines == [
        "Basic analysis:",
        "- Median operation time: 20 ns",
        "- Mean operation time: 18 ns",
        "- Operation time stddev: 8 ns",
        "- Median operations per second: 50000000",
        "- Mean operations per second: 55555556",
    ]


def test_output_format_from_path():
    """Format follows the file suffix."""
    assert OutputFormat.from_path("s.json") == OutputFormat.JSON
    assert OutputFormat.from_path("s.YAML") == OutputFormat.YAML
    assert OutputFormat.from_path("s.yml") == OutputFormat.YAML
    assert OutputFormat.from_path("s.txt") == OutputFormat.TEXT
    assert OutputFormat.from_path("summary") == OutputFormat.JSON


def test_summary_report_json(summary):
    """JSON export carries metadata, config and summary."""
    report = SummaryReport(BenchmarkConfig.build(algorithm="ECDSA_P256", rounds=3))
    report.set_summary(summary)

    output = StringIO()
    report.emit(output, format=OutputFormat.JSON)
    data = json.loads(output.getvalue())

    assert data["config"]["algorithm"] == "ECDSA_P256"
    assert data["config"]["rounds"] == 3
    assert data["summary"]["median_ns"] == 20
    assert data["metadata"]["timestamp_end"] is not None
    assert data["metadata"]["cryptography_version"]


def test_summary_report_yaml_file(tmp_path, summary):
    """YAML is chosen from the file suffix."""
    report = SummaryReport(BenchmarkConfig())
    report.set_summary(summary)
    path = tmp_path / "summary.yaml"

    report.emit(path)
    data = yaml.safe_load(path.read_text(encoding="utf-8"))

    assert data["summary"]["mean_ops_per_sec"] == 55_555_556
    assert data["config"]["output"] == "results.csv"


def test_summary_report_text(summary):
    """Text export embeds the console summary block."""
    report = SummaryReport(BenchmarkConfig())
    report.set_summary(summary)

    output = StringIO()
    report.emit(output, format=OutputFormat.TEXT)

    assert "Algorithm:     ED25519" in output.getvalue()
    assert "- Median operation time: 20 ns" in output.getvalue()


def test_summary_report_requires_summary():
    """Exporting before the run finished is a programming error."""
    with pytest.raises(ValueError):
        SummaryReport(BenchmarkConfig()).to_export()


def test_check_destination_accepts_new_file(tmp_path):
    """A fresh file in an existing directory is a valid destination."""
    report = SummaryReport(BenchmarkConfig.build(output=tmp_path / "results.csv"))

    assert report.check_destination(tmp_path / "summary.json") == tmp_path / "summary.json"


@pytest.mark.parametrize(
    "destination, message",
    [
        ("results.csv", "overwrite the results file"),
        ("missing/summary.json", "does not exist"),
        (".", "is a directory"),
    ],
)
def test_check_destination_rejects(tmp_path, destination, message):
    """Unusable summary paths are configuration errors."""
    report = SummaryReport(BenchmarkConfig.build(output=tmp_path / "results.csv"))

    with pytest.raises(ConfigurationError, match=message):
        report.check_destination(tmp_path / destination)
