# 指定したモザイクを含むトランザクションの受信を許可・拒否するコマンド
import logging
from dataclasses import dataclass
from typing import Optional

import requests
import typer
from symbolchain.sc import (
    AccountMosaicRestrictionTransactionV1,
    AccountRestrictionFlags,
    Amount,
    UnresolvedMosaicId,
)

from symbol_cli.commands.announce import MAX_FEE_PROMPT, AnnounceOptions, announce_transaction, get_profile
from symbol_cli.errors import SymbolCliError
from symbol_cli.functions.create_deadline import create_deadline
from symbol_cli.options_resolver import resolve_option
from symbol_cli.profile import Profile
from symbol_cli.services.restriction_service import RestrictionService
from symbol_cli.validators import (
    AccountRestrictionDirectionValidator,
    AccountRestrictionTypeValidator,
    BinaryValidator,
    MosaicIdValidator,
    NumericStringValidator,
    parse_mosaic_id,
)

logger = logging.getLogger(__name__)


@dataclass
class CommandOptions(AnnounceOptions):
    restriction_type: Optional[str] = None
    restriction_direction: Optional[str] = None
    modification_action: Optional[str] = None
    value: Optional[str] = None


def resolve_options(options: CommandOptions) -> CommandOptions:
    options.restriction_type = resolve_option(
        options.restriction_type,
        "Introduce the restriction type (allow, block): ",
        AccountRestrictionTypeValidator(),
    )
    options.modification_action = resolve_option(
        options.modification_action,
        "Introduce the modification action (1: Add, 0: Remove): ",
        BinaryValidator(),
    )
    options.restriction_direction = resolve_option(
        options.restriction_direction,
        "Introduce the restriction direction (incoming, outgoing): ",
        AccountRestrictionDirectionValidator(),
    )
    options.value = resolve_option(
        options.value,
        "Introduce the mosaic identifier: ",
        MosaicIdValidator(),
    )
    # 空の場合は手数料0
    options.max_fee = resolve_option(
        options.max_fee,
        MAX_FEE_PROMPT,
        NumericStringValidator(),
        default="0",
    )
    return options


def create_transaction(
    profile: Profile,
    options: CommandOptions,
    restriction_flags: AccountRestrictionFlags,
    deadline: int,
) -> AccountMosaicRestrictionTransactionV1:
    mosaic_id: UnresolvedMosaicId = UnresolvedMosaicId(parse_mosaic_id(options.value))

    # 1: 追加 0: 削除
    is_addition: bool = options.modification_action == "1"

    tx: AccountMosaicRestrictionTransactionV1 = profile.facade.transaction_factory.create({
        "type": "account_mosaic_restriction_transaction_v1",
        "restriction_flags": restriction_flags,
        "restriction_additions": [mosaic_id] if is_addition else [],
        "restriction_deletions": [] if is_addition else [mosaic_id],
        "signer_public_key": profile.account.public_key,
        "deadline": deadline,
    })
    tx.fee = Amount(int(options.max_fee) if options.max_fee else 0)
    return tx


def execute(
    restriction_type: Optional[str] = typer.Option(
        None, "--restriction-type", "-t",
        help="Restriction type (allow, block).",
        callback=AccountRestrictionTypeValidator().as_callback(),
    ),
    restriction_direction: Optional[str] = typer.Option(
        None, "--restriction-direction", "-d",
        help="Restriction direction (incoming, outgoing).",
        callback=AccountRestrictionDirectionValidator().as_callback(),
    ),
    modification_action: Optional[str] = typer.Option(
        None, "--modification-action", "-a",
        help="Modification action. (1: Add, 0: Remove).",
        callback=BinaryValidator().as_callback(),
    ),
    value: Optional[str] = typer.Option(
        None, "--value", "-v",
        help="Mosaic to allow / block.",
        callback=MosaicIdValidator().as_callback(),
    ),
    max_fee: Optional[str] = typer.Option(
        None, "--max-fee", "-f",
        help="Maximum fee you want to pay to announce the transaction.",
        callback=NumericStringValidator().as_callback(),
    ),
    profile: Optional[str] = typer.Option(None, "--profile", help="Select between your profiles, by providing a profile name."),
    sync: bool = typer.Option(False, "--sync", help="Wait until the transaction is confirmed."),
) -> None:
    """Allow or block incoming transactions containing a given set of mosaics."""
    options = CommandOptions(
        restriction_type=restriction_type,
        restriction_direction=restriction_direction,
        modification_action=modification_action,
        value=value,
        max_fee=max_fee,
        profile=profile,
        sync=sync,
    )
    try:
        resolve_options(options)
        # ノードへ問い合わせる前に制限フラグを確定させる
        restriction_flags: AccountRestrictionFlags = RestrictionService().get_account_mosaic_restriction_flags(
            options.restriction_type, options.restriction_direction
        )
        signer: Profile = get_profile(options)
        tx: AccountMosaicRestrictionTransactionV1 = create_transaction(
            signer, options, restriction_flags, create_deadline(signer.url)
        )
        logger.debug("account mosaic restriction transaction: %s", tx)
        announce_transaction(signer, tx, options.sync)
    except SymbolCliError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except requests.RequestException as e:
        typer.echo(f"Error: could not reach the node: {e}", err=True)
        raise typer.Exit(1)
