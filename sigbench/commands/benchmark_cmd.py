"""Benchmark command - resolves configuration and runs the signature benchmark.

CLI Examples:
    sigbench                                   # Ed25519 with default settings
    sigbench --alg ECDSA_P256 --rounds 200     # Fewer rounds of ECDSA P-256
    sigbench --output p384.csv --alg ecdsa_p384
    sigbench --config bench.yaml --ops 500     # File values, --ops wins
    sigbench --summary-output summary.json     # Also export the summary
"""

from pathlib import Path
from typing import Any

import click
import yaml

from sigbench.bench import SignatureBenchmark, SummaryReport
from sigbench.errors import BenchmarkError, ConfigurationError
from sigbench.models import BenchmarkConfig
from sigbench.utils.logger import Logger

# Accepted config file keys (after replacing dashes with underscores)
PARAMETER_NAMES: dict[str, str] = {
    "alg": "algorithm",
    "algorithm": "algorithm",
    "output": "output",
    "warmup_rounds": "warmup_rounds",
    "rounds": "rounds",
    "ops": "ops_per_round",
    "ops_per_round": "ops_per_round",
    "data_size": "data_size",
}


def load_config(config_path: str | Path) -> dict[str, Any]:
    """Load benchmark parameters from a YAML file.

    Config format:
        alg: ECDSA_P256
        rounds: 500
        ops: 200
        data-size: 128
        output: p256.csv

    Args:
        config_path: Path to YAML config file.

    Returns:
        Parameters keyed by BenchmarkConfig field name.

    Raises:
        ConfigurationError: If the file is missing, not valid YAML, not a
            mapping, or holds an unknown key.
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Error parsing config: {e}") from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError("Config must be a YAML dictionary")

    params: dict[str, Any] = {}
    for key, value in raw.items():
        name = PARAMETER_NAMES.get(str(key).replace("-", "_"))
        if name is None:
            valid = ", ".join(sorted(PARAMETER_NAMES))
            raise ConfigurationError(f"Unknown config key '{key}'. Valid: {valid}")
        params[name] = value
    return params


def resolve_config(
    cli_values: dict[str, Any], config_path: str | Path | None = None
) -> BenchmarkConfig:
    """Merge defaults, the config file and explicit CLI values.

    Args:
        cli_values: Values from the command line, None where not given.
        config_path: Optional YAML config file.

    Returns:
        The validated, immutable configuration.

    Raises:
        ConfigurationError: If any layer holds an invalid value.
    """
    values: dict[str, Any] = {}
    if config_path is not None:
        values.update(load_config(config_path))
    values.update({key: value for key, value in cli_values.items() if value is not None})
    return BenchmarkConfig.build(**values)


def run_benchmark(
    algorithm: str | None,
    output: str | None,
    warmup_rounds: int | None,
    rounds: int | None,
    ops: int | None,
    data_size: int | None,
    config: str | None = None,
    summary_output: str | None = None,
) -> None:
    """Run the benchmark and translate failures into CLI errors.

    Configuration problems exit with status 2, every other benchmark failure
    with status 1.
    """
    log = Logger.get("commands.benchmark")

    try:
        benchmark_config = resolve_config(
            {
                "algorithm": algorithm,
                "output": output,
                "warmup_rounds": warmup_rounds,
                "rounds": rounds,
                "ops_per_round": ops,
                "data_size": data_size,
            },
            config,
        )
        report = SummaryReport(benchmark_config)
        if summary_output:
            report.check_destination(summary_output)
        outcome = SignatureBenchmark(benchmark_config).run()

        if summary_output:
            report.set_summary(outcome.summary)
            report.emit(summary_output)
            log.info(f"Summary written to {summary_output}")

    except ConfigurationError as e:
        raise click.UsageError(str(e), ctx=click.get_current_context(silent=True)) from e
    except BenchmarkError as e:
        log.error(str(e))
        raise click.ClickException(str(e)) from e
