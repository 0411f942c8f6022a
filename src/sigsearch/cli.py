import asyncio
import json
import logging

from dataclasses import asdict
from rich.console import Console
from typing import Optional

import typer

from sigsearch import __version__
from sigsearch.config import load_search_config
from sigsearch.parsers.base import MalformedDeclarationError
from sigsearch.search import list_declarations, search_signatures

app = typer.Typer(
    help="sigsearch - find TypeScript declarations by type signature",
    no_args_is_help=True,
)

console = Console()


def _fail(error: Exception, code: int):
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=code)


@app.command()
def search(
    file: str,
    query: str,
    limit: Optional[int] = typer.Option(
        None, "--limit", "-n", min=1, help="Maximum number of results (default from .sigsearch, else 10)"
    ),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output results as JSON"),
    skip_malformed: bool = typer.Option(
        False, "--skip-malformed", help="Warn about malformed declarations instead of failing"
    ),
):
    """Rank the declarations in FILE by similarity to a QUERY signature.

    Args:
        file: TypeScript source file to search
        query: Signature to look for, e.g. "(number, number) -> number"

    Examples:
        sigsearch search src/math.ts "(number, number) -> number"
    """
    config = load_search_config()
    if limit is not None:
        config.max_results = limit

    try:
        results = search_signatures(file, query, config=config, skip_malformed=skip_malformed)
    except MalformedDeclarationError as e:
        _fail(e, code=2)
    except (OSError, ValueError) as e:
        _fail(e, code=1)
    except Exception as e:
        _fail(e, code=2)

    if json_output:
        typer.echo(json.dumps([asdict(result) for result in results], indent=2))
        return

    for result in results:
        typer.echo(result.declaration.format(file))


@app.command(name="list")
def list_command(
    file: str,
    json_output: bool = typer.Option(False, "--json", "-j", help="Output declarations as JSON"),
    skip_malformed: bool = typer.Option(
        False, "--skip-malformed", help="Warn about malformed declarations instead of failing"
    ),
):
    """List every declaration in FILE with its canonical signature, in source order.

    Args:
        file: TypeScript source file to read
    """
    try:
        declarations = list_declarations(file, skip_malformed=skip_malformed)
    except MalformedDeclarationError as e:
        _fail(e, code=2)
    except (OSError, ValueError) as e:
        _fail(e, code=1)
    except Exception as e:
        _fail(e, code=2)

    if json_output:
        typer.echo(json.dumps([asdict(declaration) for declaration in declarations], indent=2))
        return

    for declaration in declarations:
        typer.echo(declaration.format(file))


@app.command()
def mcp_server():
    """Start the MCP server.

    This command starts the Model Context Protocol server that exposes
    signature search to MCP clients over stdio.
    """
    from sigsearch.mcp_server import main

    asyncio.run(main())


def _version_callback(value: bool):
    """Show version and exit."""
    if value:
        console.print(f"sigsearch version {__version__}")
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
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
