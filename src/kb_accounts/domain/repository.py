"""Account config source Protocol: dependency inversion for testability.

Unit tests inject a stub that conforms to this Protocol.
Infrastructure layer provides the Redis-backed implementation.
"""

from typing import Protocol

from src.kb_accounts.domain.models import UserAccountConfig


class AccountConfigSourceProtocol(Protocol):
    async def list_accounts(self) -> list[UserAccountConfig]: ...
