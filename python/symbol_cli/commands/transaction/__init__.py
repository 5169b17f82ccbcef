import typer

from symbol_cli.commands.transaction import accountmosaicrestriction

app = typer.Typer(help="Announce transactions to the network.", no_args_is_help=True)
app.command("accountmosaicrestriction")(accountmosaicrestriction.execute)
