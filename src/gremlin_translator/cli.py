"""Command-line interface for the Gremlin translator."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from gremlin_translator import __version__
from gremlin_translator.common.logging import ClickLogger, LogLevel
from gremlin_translator.renderer.translator import DEFAULT_MAX_DEPTH, DEFAULT_SOURCE


@click.group()
@click.version_option(version=__version__, prog_name="gremlin-translator")
def main() -> None:
    """Gremlin Translator - Render traversal bytecode as Gremlin query text."""
    pass


@main.command()
@click.option(
    "--input", "-i",
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Input file containing bytecode JSON. If not provided, reads from stdin.",
)
@click.option(
    "--output", "-o",
    "output_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file for the query text. If not provided, writes to stdout.",
)
@click.option(
    "--source", "-s",
    default=DEFAULT_SOURCE,
    show_default=True,
    help="Traversal source identifier prefixed to the query.",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Render empty collections as []/{} and fail on empty predicates.",
)
@click.option(
    "--escape-strings",
    is_flag=True,
    help="Backslash-escape quotes and backslashes inside string literals.",
)
@click.option(
    "--include-sources",
    is_flag=True,
    help="Emit source instructions (withSack, withSideEffect...) before the steps.",
)
@click.option(
    "--max-depth",
    type=click.IntRange(min=1),
    default=DEFAULT_MAX_DEPTH,
    show_default=True,
    help="Maximum nesting depth of arguments and sub-traversals.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log progress to stderr.")
def translate(
    input_file: Path | None,
    output_file: Path | None,
    source: str,
    strict: bool,
    escape_strings: bool,
    include_sources: bool,
    max_depth: int,
    verbose: bool,
) -> None:
    """Translate bytecode JSON (GraphSON 3 or plain) to a Gremlin query."""
    logger = ClickLogger(LogLevel.DEBUG if verbose else LogLevel.WARNING)

    # Read the bytecode document
    if input_file:
        document = input_file.read_text(encoding="utf-8")
    else:
        document = sys.stdin.read()

    if not document.strip():
        click.echo("Error: Empty input", err=True)
        sys.exit(1)

    # Translate
    try:
        from gremlin_translator.process.graphson import GraphSONReader
        from gremlin_translator.renderer.translator import Translator

        bytecode = GraphSONReader(logger).read(document)
        translator = Translator(
            source,
            lenient=not strict,
            escape_strings=escape_strings,
            include_source_instructions=include_sources,
            max_depth=max_depth,
        )
        query = translator.translate(bytecode)
    except Exception as e:
        click.echo(f"Error translating bytecode: {e}", err=True)
        sys.exit(1)

    logger.debug("Translated to %d characters", len(query))

    # Output
    if output_file:
        output_file.write_text(query, encoding="utf-8")
        click.echo(f"Query written to {output_file}")
    else:
        click.echo(query)


@main.command()
@click.option(
    "--output", "-o",
    "output_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file for the bytecode template. If not provided, writes to stdout.",
)
def init_bytecode(output_file: Path | None) -> None:
    """Generate a template bytecode file."""
    template = {
        "@type": "g:Bytecode",
        "@value": {
            "source": [],
            "step": [
                ["V", "3"],
                ["hasLabel", "airport"],
                [
                    "has",
                    "code",
                    {
                        "@type": "g:P",
                        "@value": {"predicate": "within", "value": ["AUS", "DFW"]},
                    },
                ],
                [
                    "repeat",
                    {
                        "@type": "g:Bytecode",
                        "@value": {"step": [["out", "route"], ["simplePath"]]},
                    },
                ],
                ["times", {"@type": "g:Int32", "@value": 2}],
                ["path"],
                ["by", "code"],
            ],
        },
    }

    result = json.dumps(template, indent=2)

    if output_file:
        output_file.write_text(result, encoding="utf-8")
        click.echo(f"Bytecode template written to {output_file}")
    else:
        click.echo(result)


if __name__ == "__main__":
    main()
