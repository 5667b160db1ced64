"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Veritree, a product of Garudex Labs

CLI context for Veritree.

Provides shared context object and decorators for CLI commands.
"""

import functools
import sys

import click

from veritree.exceptions import VeritreeError
from veritree.merkle import TreeBuilder


# Global context object to share configuration across commands
class CLIContext:
    """Context object for CLI commands."""
    
    def __init__(self):
        self.config = None
        self.config_path = None
        self.verbose = False

    def get_algorithm(self, algorithm=None) -> str:
        """Algorithm name from the command line, falling back to configuration."""
        return algorithm or self.config.tree.hash_algorithm

    def get_builder(self, algorithm=None) -> TreeBuilder:
        """
        Create a TreeBuilder from the loaded configuration.

        Args:
            algorithm: Optional algorithm name overriding the configured one
        """
        tree_config = self.config.tree
        return TreeBuilder(
            algorithm=self.get_algorithm(algorithm),
            use_parallel=tree_config.parallel_enabled,
            parallel_threshold=tree_config.parallel_threshold,
            max_workers=tree_config.max_workers,
        )


pass_context = click.make_pass_decorator(CLIContext, ensure=True)


def handle_veritree_error(func):
    """
    Decorator to handle VeritreeError exceptions in CLI commands.

    Catches VeritreeError exceptions and displays user-friendly error messages.

    Args:
        func: CLI command function to wrap

    Returns:
        Wrapped function
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except VeritreeError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

    return wrapper
