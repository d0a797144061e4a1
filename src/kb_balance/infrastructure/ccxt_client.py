"""ccxt-backed BalanceClient.

One exchange instance per credential, created for a single fetch_balance()
call and closed right after. Auth signing, rate limiting and HTTP timeouts
are whatever ccxt does by default.
"""

import logging
from collections.abc import Mapping
from typing import Any

import ccxt.async_support as ccxt_async

from src.kb_balance.domain.models import AccountCredential

logger = logging.getLogger("kb.exchange")


class CcxtBalanceClient:
    def __init__(self, exchange_id: str = "krakenfutures") -> None:
        self._exchange_id = exchange_id

    def _create_exchange(self, credential: AccountCredential) -> Any:
        exchange_cls = getattr(ccxt_async, self._exchange_id)
        return exchange_cls(
            {
                "apiKey": credential.api_key,
                "secret": credential.secret,
            }
        )

    async def fetch_balance(self, credential: AccountCredential) -> Mapping[str, Any]:
        exchange = self._create_exchange(credential)
        try:
            return await exchange.fetch_balance()
        finally:
            try:
                await exchange.close()
            except Exception:
                # A failed close must not hide the fetch outcome
                logger.exception(
                    "closing %s client failed account=%s",
                    self._exchange_id,
                    credential.name,
                )
