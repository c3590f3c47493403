"""Redex CLI Package - command line front end for the interpreter."""

import logging

import click

from redex.config import DEFAULT_CONFIG
from redex.version import __version__
from redex.cli.evaluate import eval_command
from redex.cli.repl import repl_command


@click.group()
@click.version_option(__version__, prog_name="redex")
@click.option('--log-level', default=DEFAULT_CONFIG.log_level, show_default=True,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              help='Logging level')
def main(log_level):
    """Redex - evaluate arithmetic scripts with let/const bindings."""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


main.add_command(eval_command, "eval")
main.add_command(repl_command, "repl")

__all__ = [
    "main",
    "eval_command",
    "repl_command",
]
