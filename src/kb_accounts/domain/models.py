"""Domain models for kb_accounts: pure dataclasses, no pydantic dependency."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from src.kb_accounts.domain.constants import ACCOUNT_SLOTS
from src.kb_balance.domain.models import AccountCredential


def key_pairs_from(source: Any) -> tuple[tuple[str, str], ...]:
    """Read the (api_key, secret) pairs off any object using the slot attribute names."""
    return tuple(
        (
            getattr(source, f"{prefix}_API_KEY", None) or "",
            getattr(source, f"{prefix}_API_SECRET", None) or "",
        )
        for _, prefix in ACCOUNT_SLOTS
    )


def build_credentials(key_pairs: Sequence[tuple[str, str]]) -> list[AccountCredential]:
    return [
        AccountCredential(name=name, api_key=api_key, secret=secret)
        for (name, _), (api_key, secret) in zip(ACCOUNT_SLOTS, key_pairs)
    ]


@dataclass(frozen=True)
class UserAccountConfig:
    username: str
    initial_stake: float
    key_pairs: tuple[tuple[str, str], ...] = field(default=(), repr=False)

    def credentials(self) -> list[AccountCredential]:
        return build_credentials(self.key_pairs)
