"""Eval command for Redex CLI."""

import json
import sys
from typing import Any, Dict, Mapping, Tuple, Union

import click

from redex.errors import RedexError
from redex.runtime.interpreter import EvaluationResult, evaluate


def parse_number(text: str) -> Union[int, float]:
    """Parse a command line value as int, falling back to float."""
    try:
        return int(text)
    except ValueError:
        return float(text)


def parse_context(ctx, param, values: Tuple[str, ...]) -> Dict[str, Union[int, float]]:
    """Click callback turning repeated NAME=VALUE options into a context dict."""
    context = {}
    for item in values:
        name, sep, raw = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"expected NAME=VALUE, got {item!r}")
        try:
            context[name.strip()] = parse_number(raw.strip())
        except ValueError:
            raise click.BadParameter(f"value for {name.strip()!r} must be numeric, got {raw!r}") from None
    return context


def format_env(env: Mapping[str, Any]) -> str:
    return ", ".join(f"{name}={value}" for name, value in env.items())


def render_result(result: EvaluationResult) -> None:
    click.echo(f"Result: {result.result}")
    if result.env:
        click.echo(f"Env: {format_env(result.env)}")
    if result.provenance:
        click.echo(f"Provenance: {format_env(result.provenance)}")


@click.command()
@click.argument('expression', nargs=-1)
@click.option('--context', '-c', 'context', multiple=True, callback=parse_context,
              metavar='NAME=VALUE', help='Predefined numeric binding (repeatable)')
@click.option('--json', '-j', 'json_output', is_flag=True, help='Output as JSON')
def eval_command(expression, context, json_output):
    """Evaluate EXPRESSION, or standard input when no expression is given."""
    source = " ".join(expression) if expression else click.get_text_stream("stdin").read()
    if not source.strip():
        click.echo("Error: nothing to evaluate", err=True)
        sys.exit(1)

    try:
        result = evaluate(source, context=context)
    except RedexError as e:
        if json_output:
            click.echo(json.dumps({"success": False, **e.to_dict()}, indent=2), err=True)
        else:
            click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    if json_output:
        click.echo(json.dumps({"success": True, **result.to_dict()}, indent=2))
    else:
        render_result(result)
