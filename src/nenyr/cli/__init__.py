"""
Nenyr CLI Package.

- project.py: check and tokens commands
- utils.py: Shared utilities
"""

import typer

from nenyr.cli.project import check_command, tokens_command
from nenyr.cli.utils import version_callback

app = typer.Typer(
    help="Nenyr – parser and checker for the Nenyr styling language",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    pass


app.command("check")(check_command)
app.command("tokens")(tokens_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = ["app", "main"]
