from pathlib import Path
from typing import Any, Dict
from unittest.mock import MagicMock

import pytest
from symbolchain.CryptoTypes import PrivateKey

from symbol_cli.profile import Profile, ProfileRepository

NODE_URL = "http://localhost:3000"
NETWORK_TIMESTAMP = 60_000_000


def make_response(body: Dict[str, Any], status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.json.return_value = body
    return response


def node_time_response() -> MagicMock:
    return make_response({
        "communicationTimestamps": {
            "sendTimestamp": str(NETWORK_TIMESTAMP),
            "receiveTimestamp": str(NETWORK_TIMESTAMP),
        }
    })


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    profiles_file = tmp_path / "symbolrc.json"
    monkeypatch.setenv("SYMBOL_CLI_PROFILES", str(profiles_file))
    for name in ("NODE_URL", "PRIVATE_KEY", "NETWORK"):
        monkeypatch.delenv(name, raising=False)
    # .envを読み込まないようにする
    monkeypatch.chdir(tmp_path)
    return profiles_file


@pytest.fixture
def profile() -> Profile:
    profile = Profile(
        name="default",
        url=NODE_URL,
        network="testnet",
        private_key=str(PrivateKey.random()),
    )
    ProfileRepository().save(profile)
    return profile
