"""Sigbench - digital-signature latency and throughput microbenchmarks."""

from sigbench.version.sigbench_version import SIGBENCH_VERSION, Version

__version__ = str(SIGBENCH_VERSION)
__version_info__ = SIGBENCH_VERSION

__all__ = [
    "SIGBENCH_VERSION",
    "Version",
    "__version__",
    "__version_info__",
]
