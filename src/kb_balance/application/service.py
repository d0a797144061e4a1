"""BalanceApplicationService — the one routine both pages share.

fetch_balances() walks the credentials in order, awaiting one exchange call
at a time. A failing account becomes an error entry and the loop moves on.
build_report() adds the profit/loss aggregation on top.
"""

import logging
from collections.abc import Sequence

from src.kb_balance.domain.client import BalanceClientProtocol
from src.kb_balance.domain.models import AccountCredential, BalanceReport, BalanceResult
from src.kb_balance.domain.normalize import normalize_snapshot
from src.kb_balance.domain.report import build_report
from src.kb_balance.infrastructure.ccxt_client import CcxtBalanceClient

logger = logging.getLogger("kb.balance")

UNKNOWN_ERROR = "Unknown error"


def error_message(exc: BaseException) -> str:
    message = str(exc).strip()
    return message or UNKNOWN_ERROR


class BalanceApplicationService:
    def __init__(self, client: BalanceClientProtocol | None = None) -> None:
        self._client: BalanceClientProtocol = client or CcxtBalanceClient()

    async def fetch_balance(self, credential: AccountCredential) -> BalanceResult:
        try:
            snapshot = await self._client.fetch_balance(credential)
            result = normalize_snapshot(credential.name, snapshot)
        except Exception as exc:
            logger.warning(
                "balance fetch failed account=%s error_type=%s error=%s",
                credential.name,
                type(exc).__name__,
                exc,
            )
            return BalanceResult.failed(credential.name, error_message(exc))

        if result.defaulted_fields:
            logger.warning(
                "balance fields defaulted to 0 account=%s fields=%s",
                credential.name,
                ",".join(result.defaulted_fields),
            )
        logger.info(
            "balance fetched account=%s total_usd=%s info_usd=%s sum_usd=%s",
            credential.name,
            result.total_usd,
            result.info_usd,
            result.sum_usd,
        )
        return result

    async def fetch_balances(
        self, credentials: Sequence[AccountCredential]
    ) -> list[BalanceResult]:
        # One await at a time; output[i] belongs to credentials[i]
        results: list[BalanceResult] = []
        for credential in credentials:
            results.append(await self.fetch_balance(credential))
        return results

    async def build_report(
        self, credentials: Sequence[AccountCredential], initial_stake: float
    ) -> BalanceReport:
        results = await self.fetch_balances(credentials)
        report = build_report(results, initial_stake)
        logger.info(
            "report built accounts=%d failed=%d total_usd=%s profit=%.2f",
            len(results),
            sum(1 for r in results if not r.ok),
            report.total_usd,
            report.profit,
        )
        return report
