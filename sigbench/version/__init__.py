from sigbench.version.sigbench_version import SIGBENCH_VERSION, Version

__all__ = ["SIGBENCH_VERSION", "Version"]
