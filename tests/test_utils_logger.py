"""Tests for the centralized logging utility."""

from io import StringIO

import pytest

from sigbench.utils.logger import Logger, LoggerNotConfiguredError


def test_logger_unconfigured():
    """Test that using Logger before configuration raises error."""
    Logger._configured = False

    with pytest.raises(LoggerNotConfiguredError):
        Logger.get("test")


def test_ensure_configured_sets_defaults():
    """Library entry points can log without the CLI configuring first."""
    Logger._configured = False

    Logger.ensure_configured()

    assert Logger.is_configured()
    assert Logger.get().name == "sigbench"


def test_logger_configuration():
    """Test logger configuration."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)

    log = Logger.get("bench.recorder")
    log.debug("Debug message")

    content = output.getvalue()
    assert "DEBUG" in content
    assert "[sigbench.bench.recorder]" in content
    assert "Debug message" in content


def test_logger_set_level():
    """Test changing log level."""
    output = StringIO()
    Logger.configure(level="INFO", output=output, timestamps=False)

    log = Logger.get("test_level")
    log.debug("Hidden")
    assert "Hidden" not in output.getvalue()

    Logger.set_level("DEBUG")
    log.debug("Visible")
    assert "Visible" in output.getvalue()


def test_invalid_level_rejected():
    """Unknown level names raise ValueError."""
    with pytest.raises(ValueError):
        Logger.configure(level="LOUD", output=StringIO())


def test_recorder_logs_phases(signer, make_steady_clock):
    """The recorder logs phase boundaries at INFO and rounds at DEBUG."""
    from sigbench.bench.recorder import measure_rounds
    from sigbench.models.constants import Phase

    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)

    measure_rounds(signer, 2, [b"a"], clock=make_steady_clock(), phase=Phase.WARMUP)

    content = output.getvalue()
    assert "Starting warmup phase: 2 rounds x 1 ops" in content
    assert "warmup round 2/2: 10 ns/op" in content
    assert "Finished warmup phase" in content
