"""
Command line interface for gluestack-mcp.

Commands:
- serve: run the MCP server over stdio
- list: print the component catalog as JSON
- dirname: show the directory name of a canonical component name
- exports: show the child symbols exported by a source file
"""

import asyncio
import json
from pathlib import Path

import typer

from ._version import get_version
from .core.errors import CatalogError
from .core.naming import to_directory_name
from .core.symbols import extract_exports

app = typer.Typer(
    help="MCP server for the gluestack-ui v2 component catalog.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"gluestack-mcp {get_version()}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    pass


@app.command("serve")
def serve(
    working_dir: Path = typer.Option(  # noqa: B008
        None,
        "--working-dir",
        help="Project root directory (default: current directory)",
    ),
) -> None:
    """
    Run the MCP server.

    Serves the catalog tools over stdio for MCP clients.
    """
    from .server import run_server

    project_root = working_dir.resolve() if working_dir else Path.cwd()

    try:
        asyncio.run(run_server(project_root))
    except KeyboardInterrupt:
        typer.echo("\nMCP server stopped.", err=True)
    except Exception as e:
        typer.echo(f"Error running MCP server: {e}", err=True)
        raise typer.Exit(code=1)


@app.command("list")
def list_components(
    working_dir: Path = typer.Option(  # noqa: B008
        None,
        "--working-dir",
        help="Project root directory (default: current directory)",
    ),
) -> None:
    """Print the component catalog and child components as JSON."""
    from .core.config import load_config
    from .core.service import CatalogService

    project_root = working_dir.resolve() if working_dir else Path.cwd()

    try:
        service = CatalogService(load_config(project_root))
        result = asyncio.run(service.list_components())
    except CatalogError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(json.dumps(result.model_dump(), indent=2))


@app.command("dirname")
def dirname(name: str = typer.Argument(..., help="Canonical component name")) -> None:
    """Print the local directory name for a component."""
    typer.echo(to_directory_name(name))


@app.command("exports")
def exports(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Entry source file"),
    name: str = typer.Option(None, "--name", help="Component name to leave out"),
) -> None:
    """Print the symbols exported by a component entry file."""
    try:
        symbols = extract_exports(file.read_text(encoding="utf-8"), file.suffix, file)
    except (CatalogError, OSError, UnicodeDecodeError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    for symbol in symbols:
        if symbol != name:
            typer.echo(symbol)
