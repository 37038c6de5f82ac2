"""CLI entry point for param-directive."""

import json
import logging
from pathlib import Path

import click
import yaml

from param_directive.parser.base import Binding
from param_directive.parser.directive import parse_directive
from param_directive.parser.errors import DirectiveError
from param_directive.parser.extract import DEFAULT_MARKER, extract_directives


def _render(data, fmt: str) -> str:
    """Render plain data as JSON or YAML."""
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True).rstrip()
    return json.dumps(data, indent=2, ensure_ascii=False)


def _dump_bindings(bindings: list[Binding]) -> list[dict]:
    return [b.model_dump(mode="json") for b in bindings]


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose (DEBUG) logging.")
def main(verbose: bool):
    """Param Directive — parse HTTP parameter binding directives."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


@main.command()
@click.argument("directive")
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "yaml"]), help="Output format.")
def parse(directive: str, fmt: str):
    """Parse a single directive body and print its bindings."""
    try:
        bindings = parse_directive(directive)
    except DirectiveError as e:
        raise click.ClickException(str(e)) from e

    click.echo(_render(_dump_bindings(bindings), fmt))


@main.command()
@click.argument("source_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--marker", default=DEFAULT_MARKER, envvar="PARAM_DIRECTIVE_MARKER", show_default=True, help="Comment marker that introduces a directive.")
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "yaml"]), help="Output format.")
def scan(source_path: Path, marker: str, fmt: str):
    """Find directive comments in a source file and print their bindings."""
    comments = extract_directives(source_path, marker=marker)

    results = []
    for comment in comments:
        try:
            bindings = parse_directive(comment.text)
        except DirectiveError as e:
            raise click.ClickException(f"{source_path}:{comment.line}: {e}") from e
        results.append({"line": comment.line, "bindings": _dump_bindings(bindings)})

    if not results:
        click.echo(f"No '{marker}' directives found in {source_path}.", err=True)
    click.echo(_render(results, fmt))
