import logging
import time
from typing import Any, Dict, Literal

import requests

from symbol_cli.config import STATUS_POLL_ATTEMPTS, STATUS_POLL_INTERVAL
from symbol_cli.errors import TransactionStatusError

logger = logging.getLogger(__name__)


# トランザクションハッシュを指定してトランザクションの状態を確認する関数
def await_transaction_status(
    hash: str,
    node_url: str,
    transaction_status: Literal["confirmed", "unconfirmed", "partial"] = "confirmed",
    attempts: int = STATUS_POLL_ATTEMPTS,
    interval: float = STATUS_POLL_INTERVAL,
) -> Dict[str, Any]:
    for _ in range(attempts):
        time.sleep(interval)
        # トランザクションハッシュからステータスを確認
        response = requests.get(
            f"{node_url}/transactionStatus/{hash}",
            headers={"Content-Type": "application/json"},
            timeout=10,
        )
        status: Dict[str, Any] = response.json()
        logger.debug("status of %s: %s", hash, status)
        # まだノードに届いていない
        if status.get("code") == "ResourceNotFound":
            continue
        # ステータス以外のエラー応答（InvalidArgument等）
        if not response.ok or "group" not in status:
            raise TransactionStatusError(
                f"{status.get('code', response.status_code)}: {status.get('message', '')}",
                code=str(status.get("code", "")),
            )
        if status["group"] == transaction_status:
            return status
        elif status["group"] == "failed":
            raise TransactionStatusError(f"Transaction failed: {status['code']}", code=status["code"])

    raise TransactionStatusError(f"Transaction {hash} was not {transaction_status}")
