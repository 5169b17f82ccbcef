# 環境変数(.env)から読み込む設定値
import os
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_NETWORK: str = "testnet"
DEFAULT_PROFILE_NAME: str = "default"
DEFAULT_PROFILES_PATH: Path = Path.home() / ".symbolrc.json"
PROFILES_ENV: str = "SYMBOL_CLI_PROFILES"

# デッドラインはネットワーク時刻から2時間後
DEADLINE_HOURS: int = 2
# ステータス確認は1秒ごとに最大100回
STATUS_POLL_ATTEMPTS: int = 100
STATUS_POLL_INTERVAL: float = 1.0

EXPLORER_URLS = {
    "testnet": "https://testnet.symbol.fyi",
    "mainnet": "https://symbol.fyi",
}


def load_environment() -> None:
    # カレントディレクトリの.envを読み込む（既存の環境変数は上書きしない）
    load_dotenv(find_dotenv(usecwd=True))


def node_url() -> str:
    return os.getenv("NODE_URL") or ""


def private_key() -> str:
    return os.getenv("PRIVATE_KEY") or ""


def network() -> str:
    return os.getenv("NETWORK") or DEFAULT_NETWORK


def profiles_path(path: Optional[Path] = None) -> Path:
    if path is not None:
        return Path(path)
    return Path(os.getenv(PROFILES_ENV) or DEFAULT_PROFILES_PATH)


def explorer_transaction_url(network_name: str, hash: str) -> str:
    base: str = EXPLORER_URLS.get(network_name, EXPLORER_URLS["testnet"])
    return f"{base}/transactions/{hash}"
