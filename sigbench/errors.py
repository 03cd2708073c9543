"""Exception hierarchy for sigbench.

Every failure the harness can report derives from BenchmarkError. None of them
is retried: a retry would fold extra latency into the series being measured.
"""


class BenchmarkError(Exception):
    """Base exception for benchmark errors."""

    pass


class ConfigurationError(BenchmarkError):
    """Raised when the benchmark configuration is invalid.

    Always raised before any timing starts.
    """

    pass


class SigningError(BenchmarkError):
    """Raised when key generation or a signing call fails."""

    def __init__(self, algorithm: str, reason: str) -> None:
        self.algorithm = algorithm
        self.reason = reason
        super().__init__(f"{algorithm} signing failed: {reason}")


class StatisticsError(BenchmarkError):
    """Raised when a result series cannot be reduced to summary statistics."""

    pass


class ReportWriteError(BenchmarkError):
    """Raised when the raw results file cannot be written."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot write results to {path}: {reason}")


class ReportFormatError(BenchmarkError):
    """Raised when a results file cannot be parsed back."""

    pass
