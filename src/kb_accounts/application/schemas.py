"""Pydantic schema for one stored user record.

The JSON keys are fixed by the records already in the store:

    {
        "username": "alice",
        "initialStake": 5000,
        "KRAKEN_MASTER_API_KEY": "...", "KRAKEN_MASTER_API_SECRET": "...",
        "KRAKEN_SUB1_API_KEY": "...",   "KRAKEN_SUB1_API_SECRET": "...",
        ...
        "KRAKEN_SUB4_API_KEY": "...",   "KRAKEN_SUB4_API_SECRET": "..."
    }

Missing keys are tolerated; the exchange rejects that sub-account at fetch time.
"""

from pydantic import BaseModel, ConfigDict, Field

from src.kb_accounts.domain.models import UserAccountConfig, key_pairs_from


class UserAccountRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    username: str = Field(..., min_length=1)
    initial_stake: float | None = Field(None, alias="initialStake")

    KRAKEN_MASTER_API_KEY: str | None = None
    KRAKEN_MASTER_API_SECRET: str | None = None
    KRAKEN_SUB1_API_KEY: str | None = None
    KRAKEN_SUB1_API_SECRET: str | None = None
    KRAKEN_SUB2_API_KEY: str | None = None
    KRAKEN_SUB2_API_SECRET: str | None = None
    KRAKEN_SUB3_API_KEY: str | None = None
    KRAKEN_SUB3_API_SECRET: str | None = None
    KRAKEN_SUB4_API_KEY: str | None = None
    KRAKEN_SUB4_API_SECRET: str | None = None

    def to_domain(self) -> UserAccountConfig:
        return UserAccountConfig(
            username=self.username,
            initial_stake=self.initial_stake or 0.0,
            key_pairs=key_pairs_from(self),
        )
