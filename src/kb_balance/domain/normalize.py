"""Turn a raw ccxt balance snapshot into a BalanceResult.

Snapshot shape (ccxt unified structure, Kraken Futures flavour):

    {
        "info":  {"accounts": {"cash": {"balances": {"usd": "50.5"}}, ...}},
        "total": {"USD": 100.0, "BTC": 0.01, ...},
        "free":  {...},
        "used":  {...},
    }

Absent or unparseable USD figures count as 0 and are listed in
BalanceResult.defaulted_fields.
"""

from collections.abc import Mapping
from typing import Any

from src.kb_balance.domain.models import BalanceBreakdown, BalanceResult
from src.kb_common.usd import as_finite_number, finite_numbers, parse_float

TOTAL_USD_FIELD = "total.USD"
INFO_USD_FIELD = "info.accounts.cash.balances.usd"

_INFO_USD_PATH = ("info", "accounts", "cash", "balances", "usd")


def _dig(obj: Any, path: tuple[str, ...]) -> Any:
    for key in path:
        if not isinstance(obj, Mapping):
            return None
        obj = obj.get(key)
    return obj


def extract_total_usd(snapshot: Mapping[str, Any]) -> float | None:
    total = snapshot.get("total")
    if not isinstance(total, Mapping):
        return None
    return as_finite_number(total.get("USD"))


def extract_info_usd(snapshot: Mapping[str, Any]) -> float | None:
    return parse_float(_dig(snapshot, _INFO_USD_PATH))


def normalize_snapshot(name: str, snapshot: Mapping[str, Any]) -> BalanceResult:
    defaulted: list[str] = []

    total_usd = extract_total_usd(snapshot)
    if total_usd is None:
        defaulted.append(TOTAL_USD_FIELD)
        total_usd = 0.0

    info_usd = extract_info_usd(snapshot)
    if info_usd is None:
        defaulted.append(INFO_USD_FIELD)
        info_usd = 0.0

    return BalanceResult(
        name=name,
        balance=BalanceBreakdown(
            total=finite_numbers(snapshot.get("total")),
            free=finite_numbers(snapshot.get("free")),
            used=finite_numbers(snapshot.get("used")),
        ),
        total_usd=total_usd,
        info_usd=info_usd,
        sum_usd=total_usd + info_usd,
        defaulted_fields=defaulted,
    )
