import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from jardoc import __version__
from jardoc.config import JardocConfig, load_config
from jardoc.models import ProjectSourceDocumentation
from jardoc.navigation import build_navigation_links
from jardoc.program import Program
from jardoc.source_parser import SourceParser

app = typer.Typer(
    help="jardoc - extract living style guide documentation from component sources",
    no_args_is_help=True,
)

console = Console()


def _apply_overrides(
    config: JardocConfig,
    include: Optional[List[str]],
    exclude: Optional[List[str]],
    member_merge: Optional[str] = None,
    url_prefix: Optional[str] = None,
) -> JardocConfig:
    if include:
        config.include_patterns = tuple(include)
    if exclude:
        config.exclude_patterns = tuple(exclude)
    if member_merge:
        config.member_merge = member_merge
    if url_prefix is not None:
        config.url_prefix = url_prefix
    return config


def _analyze(directory: Path, config: JardocConfig) -> ProjectSourceDocumentation:
    program = Program.from_directory(
        directory,
        include_patterns=config.include_patterns,
        exclude_patterns=config.exclude_patterns,
    )
    return SourceParser(config).build(program)


@app.command()
def extract(
    directory: Path = typer.Argument(Path("."), help="Root directory of the component sources"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON to this file instead of stdout"),
    include: Optional[List[str]] = typer.Option(None, "--include", "-i", help="Regex a file path must match"),
    exclude: Optional[List[str]] = typer.Option(None, "--exclude", "-e", help="Regex that excludes a file path"),
    member_merge: Optional[str] = typer.Option(None, "--member-merge", help="concatenate or override"),
    url_prefix: Optional[str] = typer.Option(None, "--url-prefix", help="Prefix for navigation link paths"),
):
    """Extract the documentation model of a project as JSON.

    Args:
        directory: Root directory of the component sources
    """
    try:
        config = _apply_overrides(load_config(directory), include, exclude, member_merge, url_prefix)
        documentation = _analyze(directory, config)
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    result = documentation.to_dict()
    result["navigationLinks"] = [
        group.to_dict()
        for group in build_navigation_links(documentation.classes_with_docs, config.url_prefix)
    ]
    text = json.dumps(result, indent=2)

    if output is None:
        typer.echo(text)
    else:
        output.write_text(text + "\n", encoding="utf-8")
        typer.echo(f"✓ Wrote documentation for {len(documentation.classes_with_docs)} components to {output}")


@app.command()
def components(
    directory: Path = typer.Argument(Path("."), help="Root directory of the component sources"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
    include: Optional[List[str]] = typer.Option(None, "--include", "-i", help="Regex a file path must match"),
    exclude: Optional[List[str]] = typer.Option(None, "--exclude", "-e", help="Regex that excludes a file path"),
):
    """List documented components.

    Args:
        directory: Root directory of the component sources
    """
    try:
        config = _apply_overrides(load_config(directory), include, exclude)
        documentation = _analyze(directory, config)
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    if json_output:
        summary = [
            {
                "component": doc.component_doc_name,
                "group": doc.group_doc_name,
                "selector": doc.selector,
                "fileName": doc.file_name,
            }
            for doc in documentation.classes_with_docs
        ]
        typer.echo(json.dumps(summary, indent=2))
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Component")
    table.add_column("Group")
    table.add_column("Selector")
    table.add_column("Module")
    table.add_column("Properties", justify="right")
    table.add_column("Methods", justify="right")

    for doc in documentation.classes_with_docs:
        table.add_row(
            doc.component_doc_name,
            doc.group_doc_name,
            doc.selector or "",
            doc.module_details.module_ref_name if doc.module_details else "",
            str(len(doc.api_details.properties)),
            str(len(doc.api_details.methods)),
        )

    console.print(table)


def _version_callback(value: bool):
    """Show version and exit."""
    if value:
        console.print(f"jardoc version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
