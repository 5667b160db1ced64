"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Veritree, a product of Garudex Labs

CLI entry point for Veritree.

Provides command-line access to tree construction, proof generation and
proof verification.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from veritree._version import __version__
from veritree.config.settings import get_default_config_path, load_config
from veritree.exceptions import InvalidConfigurationError
from veritree.logging_config import setup_logging
from veritree.cli.context import CLIContext, pass_context


@click.group()
@click.option(
    '--config',
    '-c',
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
    default=None,
    help=f'Path to configuration file (default: {get_default_config_path()})',
)
@click.option(
    '--log-level',
    '-l',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], case_sensitive=False),
    default=None,
    help='Set logging level (default: from configuration)',
)
@click.option(
    '--verbose',
    '-v',
    is_flag=True,
    help='Enable verbose output',
)
@click.version_option(version=__version__, prog_name='veritree')
@pass_context
def cli(ctx: CLIContext, config: Optional[Path], log_level: Optional[str], verbose: bool):
    """
    Veritree - Merkle trees with compact inclusion proofs.

    Build a Merkle tree over a list of items, generate an inclusion proof
    for one item, and verify a proof against a root digest.
    """
    ctx.verbose = verbose
    ctx.config_path = str(config) if config else None

    # Load configuration
    try:
        ctx.config = load_config(ctx.config_path)
    except InvalidConfigurationError as e:
        click.echo(f"Error: Invalid configuration: {e}", err=True)
        sys.exit(1)

    # Set up logging
    effective_log_level = log_level.upper() if log_level else ctx.config.logging.level
    log_file = Path(ctx.config.logging.file) if ctx.config.logging.file else None
    setup_logging(
        level=effective_log_level,
        log_file=log_file,
        json_format=ctx.config.logging.format == "json",
    )

    if verbose:
        logger = logging.getLogger("veritree")
        logger.info(f"Loaded configuration from: {ctx.config_path or 'defaults'}")
        logger.info(f"Log level: {effective_log_level}")


# Import and register tree commands
from veritree.cli.tree import prove, root, show, verify
cli.add_command(root)
cli.add_command(prove)
cli.add_command(verify)
cli.add_command(show)


if __name__ == '__main__':
    cli()
