import json
from binascii import unhexlify
from unittest.mock import patch

import requests
from symbolchain.CryptoTypes import PrivateKey
from symbolchain.sc import AccountRestrictionFlags, TransactionFactory
from typer.testing import CliRunner

from conftest import NETWORK_TIMESTAMP, make_response, node_time_response
from symbol_cli.commands.transaction.accountmosaicrestriction import CommandOptions, create_transaction
from symbol_cli.main import app
from symbol_cli.profile import Profile, ProfileRepository

runner = CliRunner()

XYM_ID = 0x72C0212E67A08BCE
BLOCK_MOSAIC = AccountRestrictionFlags.MOSAIC_ID | AccountRestrictionFlags.BLOCK
ACCEPTED = {"message": "packet 9 was pushed to the network via /transactions"}


def command_options(**kwargs):
    values = {
        "restriction_type": "block",
        "restriction_direction": "incoming",
        "modification_action": "1",
        "value": "72C0212E67A08BCE",
        "max_fee": "20000",
    }
    values.update(kwargs)
    return CommandOptions(**values)


def invoke(args, input=None):
    return runner.invoke(app, ["transaction", "accountmosaicrestriction"] + args, input=input)


def announced_transaction(put):
    payload = json.loads(put.call_args.kwargs["data"])["payload"]
    return TransactionFactory.deserialize(unhexlify(payload))


def test_block_mosaic_addition(profile):
    tx = create_transaction(profile, command_options(), BLOCK_MOSAIC, NETWORK_TIMESTAMP)

    assert tx.restriction_flags == AccountRestrictionFlags.MOSAIC_ID | AccountRestrictionFlags.BLOCK
    assert [mosaic_id.value for mosaic_id in tx.restriction_additions] == [XYM_ID]
    assert tx.restriction_deletions == []
    assert tx.fee.value == 20000
    assert tx.deadline.value == NETWORK_TIMESTAMP
    assert tx.signer_public_key.bytes == profile.account.public_key.bytes


def test_allow_mosaic_removal(profile):
    options = command_options(restriction_type="allow", modification_action="0", max_fee="")
    tx = create_transaction(profile, options, AccountRestrictionFlags.MOSAIC_ID, NETWORK_TIMESTAMP)

    assert tx.restriction_flags == AccountRestrictionFlags.MOSAIC_ID
    assert tx.restriction_additions == []
    assert [mosaic_id.value for mosaic_id in tx.restriction_deletions] == [XYM_ID]
    assert tx.fee.value == 0


def test_outgoing_direction_is_rejected_before_contacting_node(profile):
    with patch("requests.get", side_effect=requests.ConnectionError("down")) as get, patch("requests.put") as put:
        result = invoke(["-t", "block", "-d", "outgoing", "-a", "1", "-v", "72C0212E67A08BCE", "-f", "0"])

    assert result.exit_code == 1
    assert "incoming" in result.output
    get.assert_not_called()
    put.assert_not_called()


def test_announce_with_flags(profile):
    with patch("requests.get", return_value=node_time_response()), \
            patch("requests.put", return_value=make_response(ACCEPTED, 202)) as put:
        result = invoke(["-t", "block", "-d", "incoming", "-a", "1", "-v", "72C0212E67A08BCE", "-f", "20000"])

    assert result.exit_code == 0, result.output
    assert "Transaction announced correctly" in result.output
    assert str(profile.account.public_key) in result.output
    assert put.call_args.args[0] == f"{profile.url}/transactions"
    assert "payload" in json.loads(put.call_args.kwargs["data"])


def test_prompts_for_missing_options(profile):
    with patch("requests.get", return_value=node_time_response()), \
            patch("requests.put", return_value=make_response(ACCEPTED, 202)) as put:
        result = invoke([], input="block\n1\nincoming\n72C0212E67A08BCE\n\n")

    assert result.exit_code == 0, result.output
    assert "Introduce the restriction type (allow, block):" in result.output
    assert "Introduce the mosaic identifier:" in result.output
    assert "Introduce the maximum fee you want to spend to announce the transaction:" in result.output
    put.assert_called_once()
    tx = announced_transaction(put)
    assert tx.fee.value == 0
    assert tx.restriction_flags == BLOCK_MOSAIC
    assert [mosaic_id.value for mosaic_id in tx.restriction_additions] == [XYM_ID]


def test_mixed_case_restriction_type(profile):
    with patch("requests.get", return_value=node_time_response()), \
            patch("requests.put", return_value=make_response(ACCEPTED, 202)) as put:
        result = invoke(["-t", "BLOCK", "-d", "Incoming", "-a", "0", "-v", "0x72c0212e67a08bce", "-f", "20000"])

    assert result.exit_code == 0, result.output
    tx = announced_transaction(put)
    assert tx.restriction_flags == BLOCK_MOSAIC
    assert [mosaic_id.value for mosaic_id in tx.restriction_deletions] == [XYM_ID]
    assert tx.fee.value == 20000


def test_selected_profile_signs_and_announces(profile):
    alice = Profile(name="alice", url="http://alice-node:3000", network="testnet", private_key=str(PrivateKey.random()))
    ProfileRepository().save(alice)

    with patch("requests.get", return_value=node_time_response()) as get, \
            patch("requests.put", return_value=make_response(ACCEPTED, 202)) as put:
        result = invoke(["-t", "allow", "-d", "incoming", "-a", "1", "-v", "72C0212E67A08BCE", "-f", "0", "--profile", "alice"])

    assert result.exit_code == 0, result.output
    assert get.call_args.args[0] == "http://alice-node:3000/node/time"
    assert put.call_args.args[0] == "http://alice-node:3000/transactions"
    assert str(alice.account.public_key) in result.output
    assert str(profile.account.public_key) not in result.output
    tx = announced_transaction(put)
    assert tx.signer_public_key.bytes == alice.account.public_key.bytes
    assert tx.restriction_flags == AccountRestrictionFlags.MOSAIC_ID


def test_non_binary_action_flag_is_rejected(profile):
    with patch("requests.get") as get, patch("requests.put") as put:
        result = invoke(["-t", "block", "-d", "incoming", "-a", "2", "-v", "72C0212E67A08BCE", "-f", "0"])

    assert result.exit_code == 2
    get.assert_not_called()
    put.assert_not_called()


def test_non_binary_action_prompt_is_rejected(profile):
    with patch("requests.get") as get, patch("requests.put") as put:
        result = invoke(["-t", "block"], input="add\n")

    assert result.exit_code == 1
    assert "0 or 1" in result.output
    get.assert_not_called()
    put.assert_not_called()


def test_unknown_restriction_type_is_rejected(profile):
    with patch("requests.put") as put:
        result = invoke(["-t", "deny", "-d", "incoming", "-a", "1", "-v", "72C0212E67A08BCE", "-f", "0"])

    assert result.exit_code == 2
    put.assert_not_called()


def test_unknown_restriction_direction_prompt_is_rejected(profile):
    with patch("requests.put") as put:
        result = invoke(["-t", "allow", "-a", "1"], input="sideways\n")

    assert result.exit_code == 1
    assert "incoming, outgoing" in result.output
    put.assert_not_called()


def test_malformed_mosaic_id_is_rejected(profile):
    with patch("requests.put") as put:
        result = invoke(["-t", "allow", "-d", "incoming", "-a", "1", "-f", "0"], input="symbol.xym\n")

    assert result.exit_code == 1
    assert "Invalid mosaic id" in result.output
    put.assert_not_called()


def test_missing_profile_is_reported():
    result = invoke(["-t", "block", "-d", "incoming", "-a", "1", "-v", "72C0212E67A08BCE", "-f", "0"])

    assert result.exit_code == 1
    assert "not found" in result.output


def test_rejected_announce_is_reported(profile):
    rejected = make_response({"code": "InvalidArgument", "message": "payload has an invalid format"}, 409)
    with patch("requests.get", return_value=node_time_response()), patch("requests.put", return_value=rejected):
        result = invoke(["-t", "block", "-d", "incoming", "-a", "1", "-v", "72C0212E67A08BCE", "-f", "0"])

    assert result.exit_code == 1
    assert "InvalidArgument" in result.output


def test_sync_waits_for_confirmation(profile):
    confirmed = make_response({"group": "confirmed", "code": "Success", "height": "10"})
    with patch("requests.get", side_effect=[node_time_response(), confirmed]), \
            patch("requests.put", return_value=make_response(ACCEPTED, 202)), \
            patch("symbol_cli.functions.await_transaction_status.time.sleep"):
        result = invoke(["-t", "block", "-d", "incoming", "-a", "1", "-v", "72C0212E67A08BCE", "-f", "0", "--sync"])

    assert result.exit_code == 0, result.output
    assert "Result:   Success" in result.output
    assert "https://testnet.symbol.fyi/transactions/" in result.output


def test_sync_reports_node_error(profile):
    invalid = make_response({"code": "InvalidArgument", "message": "hash has an invalid format"}, 409)
    with patch("requests.get", side_effect=[node_time_response(), invalid]), \
            patch("requests.put", return_value=make_response(ACCEPTED, 202)), \
            patch("symbol_cli.functions.await_transaction_status.time.sleep"):
        result = invoke(["-t", "block", "-d", "incoming", "-a", "1", "-v", "72C0212E67A08BCE", "-f", "0", "--sync"])

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "Transaction announced correctly" in result.output
    assert "InvalidArgument" in result.output
