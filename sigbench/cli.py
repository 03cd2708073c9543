#!/usr/bin/env python3
"""Sigbench CLI - Command-line interface for Sigbench."""

import click

from sigbench.models.constants import (
    DEFAULT_DATA_SIZE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OPS_PER_ROUND,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_ROUNDS,
    DEFAULT_WARMUP_ROUNDS,
    LOG_LEVEL_ENV_VAR,
)
from sigbench.signature.algorithms import SignatureAlgorithm
from sigbench.utils.env import get_env
from sigbench.utils.logger import Logger


def _show_version(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    from sigbench.commands.version_cmd import run_version

    run_version(verbose=bool(ctx.params.get("verbose")))
    ctx.exit()


@click.command(context_settings={"help_option_names": ["--help"]})
@click.option(
    "--alg",
    "algorithm",
    type=click.Choice([alg.value for alg in SignatureAlgorithm], case_sensitive=False),
    default=None,
    help=f"The signature algorithm to benchmark (default: {SignatureAlgorithm.ED25519})",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help=f"The file to which the raw results should be written (default: {DEFAULT_OUTPUT_FILE})",
)
@click.option(
    "--warmup-rounds",
    type=int,
    default=None,
    help=(
        "The number of rounds to perform as a warmup. Timings captured from "
        f"these rounds are discarded (default: {DEFAULT_WARMUP_ROUNDS})"
    ),
)
@click.option(
    "--rounds",
    type=int,
    default=None,
    help=f"The number of measured rounds (default: {DEFAULT_ROUNDS})",
)
@click.option(
    "--ops",
    type=int,
    default=None,
    help=f"The number of signing operations per round (default: {DEFAULT_OPS_PER_ROUND})",
)
@click.option(
    "--data-size",
    type=int,
    default=None,
    help=f"The size (in bytes) of the messages to sign (default: {DEFAULT_DATA_SIZE})",
)
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML file with benchmark parameters; explicit flags take precedence",
)
@click.option(
    "--summary-output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also write the summary to a file - format from suffix (.json/.yaml/.txt)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    is_eager=True,
    help="Enable debug logging (to stderr)",
)
@click.option(
    "--version",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_show_version,
    help="Show the version and exit",
)
def sigbench(
    algorithm,
    output,
    warmup_rounds,
    rounds,
    ops,
    data_size,
    config,
    summary_output,
    verbose,
):
    r"""Benchmark signing latency and throughput for one signature algorithm.

    \b
    Examples:
      sigbench                                  # Ed25519, 10 warmup + 1000 rounds
      sigbench --alg ECDSA_P256                 # Benchmark ECDSA over P-256
      sigbench --rounds 100 --ops 500           # Shorter run
      sigbench --output p384.csv --alg ECDSA_P384
      sigbench --config bench.yaml              # Parameters from a YAML file
      sigbench --summary-output summary.json    # Export the summary as JSON
    """
    from sigbench.commands.benchmark_cmd import run_benchmark

    if not Logger.is_configured():
        try:
            Logger.configure(
                level=get_env(LOG_LEVEL_ENV_VAR, default=DEFAULT_LOG_LEVEL),
                output="stderr",
                timestamps=True,
            )
        except ValueError as e:
            raise click.UsageError(f"Invalid {LOG_LEVEL_ENV_VAR}: {e}") from e

    if verbose:
        Logger.set_level("DEBUG")

    run_benchmark(
        algorithm=algorithm,
        output=output,
        warmup_rounds=warmup_rounds,
        rounds=rounds,
        ops=ops,
        data_size=data_size,
        config=config,
        summary_output=summary_output,
    )


if __name__ == "__main__":
    sigbench()
