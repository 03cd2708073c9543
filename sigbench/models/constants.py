"""Constants for sigbench models and commands."""

import sys

if sys.version_info >= (3, 11):  # noqa: UP036
    from enum import StrEnum
else:
    from backports.strenum import StrEnum  # noqa: UP035


class Phase(StrEnum):
    """Benchmark phases sharing the round-execution routine."""

    WARMUP = "warmup"
    MEASURED = "measured"


# Benchmark defaults
DEFAULT_OUTPUT_FILE = "results.csv"
DEFAULT_WARMUP_ROUNDS = 10
DEFAULT_ROUNDS = 1_000
DEFAULT_OPS_PER_ROUND = 1_000
DEFAULT_DATA_SIZE = 59  # bytes per signed message

# Raw results file
CSV_HEADER = ("roundStartTime", "opAverageDurationInRound")

# Progress bar
PROGRESS_BAR_WIDTH = 50

NANOS_PER_SECOND = 1_000_000_000

# Environment
LOG_LEVEL_ENV_VAR = "SIGBENCH_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
