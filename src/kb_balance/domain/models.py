"""Domain models for kb_balance: pure dataclasses, built fresh per request."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class AccountCredential:
    name: str
    api_key: str
    secret: str = field(repr=False)


@dataclass
class BalanceBreakdown:
    total: dict[str, float] = field(default_factory=dict)
    free: dict[str, float] = field(default_factory=dict)
    used: dict[str, float] = field(default_factory=dict)


@dataclass
class BalanceResult:
    name: str
    balance: BalanceBreakdown | None       # None when the fetch failed
    error: str | None = None
    total_usd: float | None = None         # total.USD
    info_usd: float | None = None          # info.accounts.cash.balances.usd
    sum_usd: float | None = None
    defaulted_fields: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None and self.balance is not None

    @classmethod
    def failed(cls, name: str, error: str) -> "BalanceResult":
        return cls(name=name, balance=None, error=error)


@dataclass
class BalanceReport:
    results: list[BalanceResult]
    initial_stake: float
    total_usd: float
    profit: float
    profit_percent: float
    generated_at: datetime

    @property
    def is_profit(self) -> bool:
        return self.profit >= 0
