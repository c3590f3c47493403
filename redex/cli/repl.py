"""Interactive REPL command for Redex CLI."""

from typing import Dict, List, Union

import click

from redex.errors import RedexError
from redex.runtime.interpreter import evaluate
from redex.cli.evaluate import format_env

HELP_TEXT = """\
Usage:
  1 + 2 * 3          arithmetic
  (1 + 2) * 3        grouping
  let x = 10         variable
  const pi = 3       constant
  x + pi             reference

Commands:
  history            show input history
  clear              reset environment and history
  env                show current bindings
  help               show this help
  exit, quit         leave the REPL

Notes:
  - constants cannot be reassigned within one line
  - integers and floats are supported"""


class ReplSession:
    """Bindings and history carried between REPL lines."""

    def __init__(self):
        self.env: Dict[str, Union[int, float]] = {}
        self.history: List[str] = []

    def run(self, line: str) -> None:
        self.history.append(line)
        try:
            result = evaluate(line, env=self.env)
        except RedexError as e:
            click.echo(f"Error: {e.message}", err=True)
            return
        self.env = result.env
        click.echo(f"=> {result.result}")

    def show_history(self) -> None:
        if not self.history:
            click.echo("No history")
            return
        for index, line in enumerate(self.history, start=1):
            click.echo(f"  {index}. {line}")

    def clear(self) -> None:
        self.env.clear()
        self.history.clear()
        click.echo("Environment and history cleared")


@click.command()
def repl_command():
    """Start an interactive Redex session."""
    session = ReplSession()
    stdin = click.get_text_stream("stdin")

    click.echo("Redex REPL - type 'help' for commands, 'exit' to quit")
    while True:
        click.echo("> ", nl=False)
        line = stdin.readline()
        if not line:
            click.echo()
            break

        line = line.strip()
        if not line:
            continue
        if line in ("exit", "quit"):
            break
        elif line == "history":
            session.show_history()
        elif line == "clear":
            session.clear()
        elif line == "env":
            click.echo(format_env(session.env) or "(empty)")
        elif line == "help":
            click.echo(HELP_TEXT)
        else:
            session.run(line)
