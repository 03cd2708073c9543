"""Pydantic models for configuration and structured output."""

from sigbench.models.benchmark_models import (
    BenchmarkConfig,
    BenchmarkExport,
    BenchmarkSummary,
    RunMetadata,
)

__all__ = [
    "BenchmarkConfig",
    "BenchmarkExport",
    "BenchmarkSummary",
    "RunMetadata",
]
