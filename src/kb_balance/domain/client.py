"""Balance client Protocol: the one capability the fetcher needs.

"Given credentials, return a balance snapshot." Unit tests inject a scripted
double; infrastructure provides the ccxt-backed implementation.
"""

from collections.abc import Mapping
from typing import Any, Protocol

from src.kb_balance.domain.models import AccountCredential


class BalanceClientProtocol(Protocol):
    async def fetch_balance(
        self, credential: AccountCredential
    ) -> Mapping[str, Any]: ...
