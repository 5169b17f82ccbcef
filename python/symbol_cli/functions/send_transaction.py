import logging
from typing import Any, Dict

import requests
from symbolchain.facade.SymbolFacade import SymbolFacade, SymbolAccount, Hash256
from symbolchain.sc import Signature

from symbol_cli.errors import AnnounceError

logger = logging.getLogger(__name__)


# トランザクションを受け取り、署名してアナウンスし、トランザクションハッシュを返す関数
def send_transaction(facade: SymbolFacade, tx: Any, sign_account: SymbolAccount, node_url: str) -> Hash256:
    signature: Signature = sign_account.sign_transaction(tx)

    json_payload: str = facade.transaction_factory.attach_signature(tx, signature)
    logger.debug("announcing to %s: %s", node_url, json_payload)

    response = requests.put(
        f"{node_url}/transactions",
        headers={"Content-Type": "application/json"},
        data=json_payload,
        timeout=10,
    )
    body: Dict[str, Any] = response.json()
    # 受け付けられた場合は {"message": "packet 9 was pushed to the network via /transactions"}
    if not response.ok:
        raise AnnounceError(
            f"{body.get('code', response.status_code)}: {body.get('message', '')}",
            code=str(body.get("code", "")),
        )
    logger.debug("announce response %s", body)

    return facade.hash_transaction(tx)
