"""
Project commands for the Nenyr CLI.

- check: Parse Nenyr files and report the first diagnostic
- tokens: Print the token stream of a file
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from nenyr.core.errors import NenyrError
from nenyr.core.fileset import discover_nenyr_files
from nenyr.core.lexer import Lexer, TokenType
from nenyr.core.manifest import MANIFEST_NAME, ParserConfig, load_manifest
from nenyr.core.parser import parse_files

from .utils import configure_logging

logger = logging.getLogger(__name__)


def _print_human_error(error: NenyrError) -> None:
    typer.echo(f"ERROR: {error.format()}", err=True)


def _print_vscode_error(error: NenyrError, root: Path) -> None:
    """Print error in VS Code format: file:line:col: error: message"""
    if error.context and error.context.context_path:
        try:
            rel_path = Path(error.context.context_path).relative_to(root)
        except ValueError:
            rel_path = Path(error.context.context_path)
        typer.echo(
            f"{rel_path}:{error.context.line}:{error.context.column}: error: {error.message}",
            err=True,
        )
    else:
        typer.echo(f"::error: {error.message}", err=True)


def _resolve_inputs(files: list[Path], manifest: str) -> tuple[list[Path], ParserConfig, Path]:
    manifest_path = Path(manifest).resolve()
    if files:
        config = load_manifest(manifest_path).parser if manifest_path.exists() else ParserConfig()
        return [f.resolve() for f in files], config, Path.cwd()

    if not manifest_path.exists():
        typer.echo(f"No files given and no {MANIFEST_NAME} found at {manifest_path}", err=True)
        raise typer.Exit(code=1)

    mf = load_manifest(manifest_path)
    root = manifest_path.parent
    return discover_nenyr_files(root, mf), mf.parser, root


def check_command(
    files: list[Path] | None = typer.Argument(None, help="Nenyr files to check"),
    manifest: str = typer.Option(
        MANIFEST_NAME, "--manifest", "-m", help="Path to nenyr.toml"
    ),
    format: str = typer.Option(
        "human", "--format", "-f", help="Output format: 'human' or 'vscode'"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """
    Parse Nenyr documents and report the first diagnostic.

    Without FILES, checks every .nyr file under the manifest's source paths.
    """
    configure_logging(verbose)
    root = Path.cwd()
    try:
        paths, config, root = _resolve_inputs(files or [], manifest)
        if not paths:
            typer.echo("No Nenyr files found.")
            return
        documents = parse_files(paths, config)
    except NenyrError as e:
        if format == "vscode":
            _print_vscode_error(e, root)
        else:
            _print_human_error(e)
        raise typer.Exit(code=1)

    for document in documents:
        logger.debug("%s: %s", document.path, document.context.name)
    typer.echo(f"OK: {len(documents)} document(s) parsed.")


def tokens_command(
    file: Path = typer.Argument(..., help="Nenyr file to tokenize"),
) -> None:
    """Print the token stream of a Nenyr file."""
    try:
        lexer = Lexer(file.read_text(encoding="utf-8"), file)
        while True:
            token = lexer.next_token()
            typer.echo(f"{token.line}:{token.column}\t{token.type.name}\t{token.value}")
            if token.type == TokenType.EOF:
                break
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"Could not read {file}: {e}", err=True)
        raise typer.Exit(code=1)
    except NenyrError as e:
        _print_human_error(e)
        raise typer.Exit(code=1)
