import logging
from typing import Any, Dict

import requests

from symbol_cli.config import DEADLINE_HOURS

logger = logging.getLogger(__name__)


# ネットワークの現在時刻から指定時間後のデッドライン（ミリ秒）を返す関数
def create_deadline(node_url: str, hours: int = DEADLINE_HOURS) -> int:
    response = requests.get(f"{node_url}/node/time", timeout=10)
    response.raise_for_status()
    network_time: Dict[str, Any] = response.json()
    current_timestamp: int = int(network_time["communicationTimestamps"]["receiveTimestamp"])
    deadline_timestamp: int = current_timestamp + (hours * 60 * 60 * 1000)
    logger.debug("network time %d, deadline %d", current_timestamp, deadline_timestamp)
    return deadline_timestamp
