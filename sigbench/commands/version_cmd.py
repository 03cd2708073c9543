"""
Version command - displays sigbench version information
"""

import click

from sigbench.version import SIGBENCH_VERSION


def run_version(verbose: bool = False) -> None:
    """
    Display sigbench version information.

    Args:
        verbose: If True, show additional details like full hash and date
    """
    if verbose:
        click.echo(f"sigbench version {SIGBENCH_VERSION.full_version()}")
        click.echo("\nDetailed version information:")
        click.echo(f"  Semantic Version: {SIGBENCH_VERSION}")
        click.echo(f"  Build Date:       {SIGBENCH_VERSION.date_string()}")
        click.echo(f"  Package Hash:     {SIGBENCH_VERSION.hash}")
    else:
        click.echo(f"sigbench {SIGBENCH_VERSION}")
