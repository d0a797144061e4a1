"""Page-test fixtures.

The pages run against the real app with every outside collaborator swapped
through app.dependency_overrides: Settings with fake env keys, a scripted
BalanceClient instead of ccxt, and an in-memory account source instead of
Redis. No network is touched.
"""

from collections.abc import Mapping
from typing import Any

import pytest
from httpx import AsyncClient

from config.settings import Settings
from src.kb_accounts.application.service import AccountResolverService
from src.kb_accounts.domain.constants import ACCOUNT_NAMES
from src.kb_accounts.domain.models import UserAccountConfig
from src.kb_balance.application.service import BalanceApplicationService
from src.kb_balance.domain.models import AccountCredential
from src.kb_web.api.dependencies import (
    get_account_resolver,
    get_balance_service,
    get_settings,
)
from src.main import app


def make_snapshot(total_usd: Any = 1000.0, info_usd: Any = "40") -> dict[str, Any]:
    return {
        "info": {"accounts": {"cash": {"balances": {"usd": info_usd}}}},
        "total": {"USD": total_usd, "BTC": 0.01},
        "free": {"USD": total_usd, "BTC": 0.01},
        "used": {"USD": 0.0, "BTC": None},
    }


class ScriptedBalanceClient:
    """Returns (or raises) a scripted outcome per account name."""

    def __init__(self) -> None:
        self.outcomes: dict[str, Mapping[str, Any] | Exception] = {
            name: make_snapshot() for name in ACCOUNT_NAMES
        }
        self.calls: list[AccountCredential] = []

    async def fetch_balance(self, credential: AccountCredential) -> Mapping[str, Any]:
        self.calls.append(credential)
        outcome = self.outcomes[credential.name]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class StaticAccountSource:
    def __init__(self, accounts: list[UserAccountConfig]) -> None:
        self.accounts = accounts
        self.error: Exception | None = None

    async def list_accounts(self) -> list[UserAccountConfig]:
        if self.error is not None:
            raise self.error
        return list(self.accounts)


def _user(username: str, initial_stake: float) -> UserAccountConfig:
    return UserAccountConfig(
        username=username,
        initial_stake=initial_stake,
        key_pairs=tuple(
            (f"{username}-key-{i}", f"{username}-secret-{i}") for i in range(5)
        ),
    )


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        _env_file=None,
        KRAKEN_MASTER_API_KEY="env-master-key",
        KRAKEN_MASTER_API_SECRET="env-master-secret",
        KRAKEN_SUB1_API_KEY="env-sub1-key",
        KRAKEN_SUB1_API_SECRET="env-sub1-secret",
        KRAKEN_SUB2_API_KEY="env-sub2-key",
        KRAKEN_SUB2_API_SECRET="env-sub2-secret",
        KRAKEN_SUB3_API_KEY="env-sub3-key",
        KRAKEN_SUB3_API_SECRET="env-sub3-secret",
        KRAKEN_SUB4_API_KEY="env-sub4-key",
        KRAKEN_SUB4_API_SECRET="env-sub4-secret",
        INITIAL_STAKE=5000,
    )


@pytest.fixture
def balance_client() -> ScriptedBalanceClient:
    return ScriptedBalanceClient()


@pytest.fixture
def account_source() -> StaticAccountSource:
    return StaticAccountSource([_user("alice", 5000), _user("bob", 0)])


@pytest.fixture
async def pages_client(
    client: AsyncClient,
    test_settings: Settings,
    balance_client: ScriptedBalanceClient,
    account_source: StaticAccountSource,
) -> AsyncClient:
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_balance_service] = lambda: BalanceApplicationService(
        balance_client
    )
    app.dependency_overrides[get_account_resolver] = lambda: AccountResolverService(
        account_source
    )
    yield client
    app.dependency_overrides.clear()
