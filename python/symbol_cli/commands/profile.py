# プロファイル（接続先ノード・ネットワーク・秘密鍵）を管理するコマンド
from typing import List, Optional

import typer
from symbolchain.CryptoTypes import PrivateKey
from symbolchain.facade.SymbolFacade import SymbolAccount

from symbol_cli import config
from symbol_cli.errors import SymbolCliError
from symbol_cli.profile import NETWORKS, Profile, ProfileRepository, profile_from_dict

app = typer.Typer(help="Manage the profiles used to sign and announce transactions.", no_args_is_help=True)


@app.command()
def create(
    name: str = typer.Option(config.DEFAULT_PROFILE_NAME, "--name", "-n", help="Profile name."),
    url: str = typer.Option(..., "--url", "-u", help="Node URL, e.g. https://sym-test-03.opening-line.jp:3001"),
    network: str = typer.Option(config.DEFAULT_NETWORK, "--network", help=f"Network ({', '.join(NETWORKS)})."),
    private_key: Optional[str] = typer.Option(
        None, "--private-key", "-p", help="Account private key. A new account is generated when omitted."
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing profile with the same name."),
) -> None:
    """Store a profile."""
    try:
        if private_key is None:
            # 新規アカウントの生成
            private_key = str(PrivateKey.random())
        profile: Profile = profile_from_dict({
            "name": name,
            "url": url,
            "network": network,
            "private_key": private_key,
        })
        account: SymbolAccount = profile.account
        ProfileRepository().save(profile, force=force)
    except SymbolCliError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Profile '{profile.name}' stored")
    typer.echo(f"Network: {profile.network}")
    typer.echo(f"Address: {account.address}")
    if profile.network == "testnet":
        # フォーセットへのURLを表示
        typer.echo(f"Faucet:  https://testnet.symbol.tools/?recipient={account.address}")


@app.command("list")
def list_profiles() -> None:
    """Show the stored profiles."""
    try:
        profiles: List[Profile] = ProfileRepository().all()
        # 秘密鍵が不正なプロファイルがあれば表示前にエラーにする
        lines: List[str] = [
            f"{profile.name}\t{profile.network}\t{profile.url}\t{profile.account.address}" for profile in profiles
        ]
    except SymbolCliError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not lines:
        typer.echo("No profiles stored")
        return
    for line in lines:
        typer.echo(line)
