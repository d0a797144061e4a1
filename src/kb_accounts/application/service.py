"""AccountResolverService — username → UserAccountConfig for the multi-tenant page."""

import logging

from src.kb_accounts.domain.models import UserAccountConfig
from src.kb_accounts.domain.repository import AccountConfigSourceProtocol
from src.kb_accounts.domain.resolver import find_account
from src.kb_common.errors import UserNotFoundError

logger = logging.getLogger("kb.accounts")


class AccountResolverService:
    def __init__(self, source: AccountConfigSourceProtocol) -> None:
        self._source = source

    async def resolve(self, username: str) -> UserAccountConfig:
        accounts = await self._source.list_accounts()
        account = find_account(username, accounts)
        if account is None:
            logger.info("user not found username=%s known=%d", username, len(accounts))
            raise UserNotFoundError(username)
        return account
