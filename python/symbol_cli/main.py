import logging

import typer

from symbol_cli import __version__, config
from symbol_cli.commands import profile, transaction

app = typer.Typer(
    name="symbol-cli",
    help="Symbol wallet command line.",
    no_args_is_help=True,
    add_completion=False,
)
app.add_typer(transaction.app, name="transaction")
app.add_typer(profile.app, name="profile")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logs."),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
) -> None:
    config.load_environment()
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
