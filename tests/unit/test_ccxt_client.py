"""Unit tests for the ccxt-backed balance client (ccxt exchange mocked)."""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.kb_balance.application.service import BalanceApplicationService
from src.kb_balance.domain.models import AccountCredential
from src.kb_balance.infrastructure.ccxt_client import CcxtBalanceClient

_CRED = AccountCredential(name="Master", api_key="k", secret="s")


def _exchange(fetch: AsyncMock) -> MagicMock:
    exchange = MagicMock()
    exchange.fetch_balance = fetch
    exchange.close = AsyncMock()
    return exchange


class TestCcxtBalanceClient:
    async def test_builds_scoped_exchange_and_closes_it(self) -> None:
        exchange = _exchange(AsyncMock(return_value={"total": {"USD": 1.0}}))
        with patch("src.kb_balance.infrastructure.ccxt_client.ccxt_async") as ccxt_mock:
            ccxt_mock.krakenfutures.return_value = exchange
            snapshot = await CcxtBalanceClient().fetch_balance(_CRED)

        assert snapshot == {"total": {"USD": 1.0}}
        ccxt_mock.krakenfutures.assert_called_once_with({"apiKey": "k", "secret": "s"})
        exchange.close.assert_awaited_once()

    async def test_closes_exchange_when_fetch_fails(self) -> None:
        exchange = _exchange(AsyncMock(side_effect=RuntimeError("auth")))
        with patch("src.kb_balance.infrastructure.ccxt_client.ccxt_async") as ccxt_mock:
            ccxt_mock.krakenfutures.return_value = exchange
            with pytest.raises(RuntimeError, match="auth"):
                await CcxtBalanceClient().fetch_balance(_CRED)
        exchange.close.assert_awaited_once()

    async def test_close_failure_does_not_hide_result(self) -> None:
        exchange = _exchange(AsyncMock(return_value={"total": {}}))
        exchange.close = AsyncMock(side_effect=RuntimeError("session gone"))
        with patch("src.kb_balance.infrastructure.ccxt_client.ccxt_async") as ccxt_mock:
            ccxt_mock.krakenfutures.return_value = exchange
            assert await CcxtBalanceClient().fetch_balance(_CRED) == {"total": {}}

    async def test_exchange_id_selects_class(self) -> None:
        exchange = _exchange(AsyncMock(return_value={}))
        with patch("src.kb_balance.infrastructure.ccxt_client.ccxt_async") as ccxt_mock:
            ccxt_mock.kraken.return_value = exchange
            await CcxtBalanceClient("kraken").fetch_balance(_CRED)
        ccxt_mock.kraken.assert_called_once()
        ccxt_mock.krakenfutures.assert_not_called()

    async def test_construction_failure_is_a_per_account_error(self) -> None:
        service = BalanceApplicationService(CcxtBalanceClient("no_such_exchange"))
        result = await service.fetch_balance(_CRED)
        assert result.balance is None
        assert "no_such_exchange" in (result.error or "")
