"""
Main CLI entry point using Typer.

This module defines the command-line interface for SchemaProjector using Typer.
It provides two commands: project and envelope.
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from schema_projector.utils import setup_logging

from .commands import envelope_command, project_command
from .display import print_error


# Create Typer app
app = typer.Typer(
    name="schema-projector",
    help="SchemaProjector - Generated JSON Schema to OpenAI Structured Outputs",
    add_completion=False,
    rich_markup_mode="rich"
)


@app.command("project")
def project(
    document: Annotated[
        Path,
        typer.Option("--document", "-d", help="Path to the generated JSON Schema document", exists=True, file_okay=True, dir_okay=False)
    ],
    strict: Annotated[
        Optional[bool],
        typer.Option("--strict/--no-strict", help="Strictness flag to forward; omitted from the output when not given")
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Path to save output JSON")
    ] = None,
    summary: Annotated[
        bool,
        typer.Option("--summary", help="Display a summary table of the projection")
    ] = False,
) -> None:
    """
    Project the first schema of a generated document.

    Example:
        schema-projector project \\
            --document output.schema.json \\
            --strict \\
            --output json_schema.json
    """
    try:
        project_command(
            document_path=document,
            strict=strict,
            output_path=output,
            show_summary=summary
        )
    except Exception as e:
        print_error(f"Command failed: {e}")
        raise typer.Exit(code=1)


@app.command("envelope")
def envelope(
    document: Annotated[
        Path,
        typer.Option("--document", "-d", help="Path to the generated JSON Schema document", exists=True, file_okay=True, dir_okay=False)
    ],
    strict: Annotated[
        Optional[bool],
        typer.Option("--strict/--no-strict", help="Strictness flag to forward; omitted from the output when not given")
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Path to save output JSON")
    ] = None,
) -> None:
    """
    Build the response_format envelope for a generated document.

    Example:
        schema-projector envelope \\
            --document output.schema.json \\
            --no-strict
    """
    try:
        envelope_command(
            document_path=document,
            strict=strict,
            output_path=output
        )
    except Exception as e:
        print_error(f"Command failed: {e}")
        raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit")
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
    log_file: Annotated[
        Optional[Path],
        typer.Option("--log-file", help="Write log records to this file instead of stderr", dir_okay=False)
    ] = None,
) -> None:
    """
    SchemaProjector - Generated JSON Schema to OpenAI Structured Outputs.

    Repackages a generated schema as an OpenAI response_format value.
    """
    if version:
        from schema_projector import __version__
        typer.echo(f"SchemaProjector version {__version__}")
        raise typer.Exit()

    if verbose or log_file:
        setup_logging(
            level="DEBUG" if verbose else "WARNING",
            log_file=str(log_file) if log_file else None
        )

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def cli() -> None:
    """CLI entry point for the console script."""
    app()


if __name__ == "__main__":
    cli()
