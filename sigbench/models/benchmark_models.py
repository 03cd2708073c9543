"""Models for benchmark configuration and results."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from sigbench.errors import ConfigurationError
from sigbench.models.constants import (
    DEFAULT_DATA_SIZE,
    DEFAULT_OPS_PER_ROUND,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_ROUNDS,
    DEFAULT_WARMUP_ROUNDS,
)
from sigbench.signature.algorithms import SignatureAlgorithm


class BenchmarkConfig(BaseModel):
    """Configuration for a single benchmark run.

    Immutable once built; the driver and the recorder receive it explicitly.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    algorithm: SignatureAlgorithm = Field(
        SignatureAlgorithm.ED25519, description="Signature algorithm to benchmark"
    )
    output: Path = Field(
        Path(DEFAULT_OUTPUT_FILE),
        description="File to which the raw per-round results are written",
    )
    warmup_rounds: int = Field(
        DEFAULT_WARMUP_ROUNDS,
        ge=0,
        strict=True,
        description="Rounds performed before measurement; their timings are discarded",
    )
    rounds: int = Field(
        DEFAULT_ROUNDS,
        ge=1,
        strict=True,
        description="Measured rounds; at least one is needed to summarize",
    )
    ops_per_round: int = Field(
        DEFAULT_OPS_PER_ROUND,
        ge=1,
        strict=True,
        description="Signing operations per round",
    )
    data_size: int = Field(
        DEFAULT_DATA_SIZE,
        gt=0,
        strict=True,
        description="Size in bytes of each signed message",
    )

    @field_validator("algorithm", mode="before")
    @classmethod
    def _parse_algorithm(cls, value: Any) -> Any:
        if isinstance(value, str):
            return SignatureAlgorithm.parse(value)
        return value

    @classmethod
    def build(cls, **values: Any) -> "BenchmarkConfig":
        """Build a config, reporting invalid values as ConfigurationError.

        Keys whose value is None are left at their defaults.

        Raises:
            ConfigurationError: If any value is invalid.
        """
        provided = {key: value for key, value in values.items() if value is not None}
        try:
            return cls(**provided)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc']) or 'config'}: {err['msg']}"
                for err in e.errors()
            )
            raise ConfigurationError(f"Invalid benchmark configuration: {problems}") from e

    @property
    def total_operations(self) -> int:
        """Signing operations in the measured phase."""
        return self.rounds * self.ops_per_round


class BenchmarkSummary(BaseModel):
    """Summary statistics over the measured per-round averages (nanoseconds)."""

    rounds: int = Field(..., ge=1, description="Number of measured rounds")
    median_ns: int = Field(..., description="Median per-operation duration")
    mean_ns: int = Field(..., description="Geometric mean per-operation duration")
    stddev_ns: int = Field(
        ..., ge=0, description="Population standard deviation of the per-round averages"
    )
    median_ops_per_sec: int = Field(
        ..., description="Throughput derived from the median duration"
    )
    mean_ops_per_sec: int = Field(
        ..., description="Throughput derived from the geometric mean duration"
    )


class RunMetadata(BaseModel):
    """Where and when a benchmark ran."""

    timestamp_start: str = Field(..., description="ISO 8601 UTC start time")
    timestamp_end: str | None = Field(None, description="ISO 8601 UTC end time")
    sigbench_version: str = Field(..., description="Harness version")
    sigbench_hash: str = Field(..., description="Short hash of the harness sources")
    python_version: str = Field(..., description="Interpreter version")
    platform: str = Field(..., description="Operating system and architecture")
    cryptography_version: str = Field(
        ..., description="Version of the signing library being timed"
    )


class BenchmarkExport(BaseModel):
    """Machine-readable record of a complete benchmark run."""

    metadata: RunMetadata
    config: BenchmarkConfig
    summary: BenchmarkSummary
