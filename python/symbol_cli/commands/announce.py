# トランザクションを署名・アナウンスするコマンド共通の処理
from dataclasses import dataclass
from typing import Any, Dict, Optional

import typer
from symbolchain.facade.SymbolFacade import Hash256

from symbol_cli import config
from symbol_cli.functions.await_transaction_status import await_transaction_status
from symbol_cli.functions.send_transaction import send_transaction
from symbol_cli.profile import Profile, ProfileRepository

MAX_FEE_PROMPT: str = "Introduce the maximum fee you want to spend to announce the transaction: "


@dataclass
class AnnounceOptions:
    max_fee: Optional[str] = None
    profile: Optional[str] = None
    sync: bool = False


def get_profile(options: AnnounceOptions) -> Profile:
    return ProfileRepository().find(options.profile)


def announce_transaction(profile: Profile, tx: Any, sync: bool = False) -> Hash256:
    hash: Hash256 = send_transaction(profile.facade, tx, profile.account, profile.url)

    typer.echo("Transaction announced correctly")
    typer.echo(f"Hash:   {hash}")
    typer.echo(f"Signer: {profile.account.public_key}")

    if sync:
        typer.echo("Waiting for the transaction to be confirmed..")
        status: Dict[str, Any] = await_transaction_status(str(hash), profile.url, "confirmed")
        typer.echo(f"Result:   {status['code']}")
        typer.echo(f"Explorer: {config.explorer_transaction_url(profile.network, str(hash))}")

    return hash
