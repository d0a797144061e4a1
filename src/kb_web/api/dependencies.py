"""FastAPI dependency providers for the page router.

Tests swap any of these through app.dependency_overrides, e.g. a Settings
object with fake keys or a BalanceApplicationService built on a scripted
BalanceClient.
"""

from typing import Annotated

from fastapi import Depends

from config.settings import Settings, settings
from src.kb_accounts.application.service import AccountResolverService
from src.kb_accounts.infrastructure.redis_store import RedisAccountConfigSource
from src.kb_balance.application.service import BalanceApplicationService
from src.kb_balance.infrastructure.ccxt_client import CcxtBalanceClient
from src.kb_common.redis_client import get_redis


def get_settings() -> Settings:
    return settings


def get_balance_service(
    app_settings: Annotated[Settings, Depends(get_settings)],
) -> BalanceApplicationService:
    return BalanceApplicationService(CcxtBalanceClient(app_settings.EXCHANGE_ID))


async def get_account_resolver(
    app_settings: Annotated[Settings, Depends(get_settings)],
) -> AccountResolverService:
    redis = await get_redis()
    return AccountResolverService(
        RedisAccountConfigSource(redis, app_settings.ACCOUNTS_CONFIG_KEY)
    )
