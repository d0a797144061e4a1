"""Profit/loss aggregation over a list of per-account results."""

from collections.abc import Sequence
from datetime import datetime, timezone

from src.kb_balance.domain.models import BalanceReport, BalanceResult


def sum_total_usd(results: Sequence[BalanceResult]) -> float:
    """Sum of sum_usd; failed accounts (sum_usd None) count as 0."""
    return sum((r.sum_usd or 0.0 for r in results), 0.0)


def calc_profit_percent(profit: float, initial_stake: float) -> float:
    if initial_stake == 0:
        return 0.0
    return profit / initial_stake * 100


def build_report(
    results: Sequence[BalanceResult], initial_stake: float
) -> BalanceReport:
    total_usd = sum_total_usd(results)
    profit = total_usd - initial_stake
    return BalanceReport(
        results=list(results),
        initial_stake=initial_stake,
        total_usd=total_usd,
        profit=profit,
        profit_percent=calc_profit_percent(profit, initial_stake),
        generated_at=datetime.now(timezone.utc),
    )
