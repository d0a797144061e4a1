"""Redis-backed account config source.

The user list is stored as one JSON array under a fixed key and read on
every request; nothing is cached in-process.
"""

import json
import logging

import redis.asyncio as aioredis
from pydantic import ValidationError

from src.kb_accounts.application.schemas import UserAccountRecord
from src.kb_accounts.domain.models import UserAccountConfig
from src.kb_common.errors import AccountConfigInvalidError

logger = logging.getLogger("kb.accounts")


class RedisAccountConfigSource:
    def __init__(self, redis: aioredis.Redis, key: str = "accounts") -> None:
        self._redis = redis
        self._key = key

    async def list_accounts(self) -> list[UserAccountConfig]:
        raw = await self._redis.get(self._key)
        if raw is None:
            logger.warning("account config key missing key=%s", self._key)
            return []

        try:
            payload = json.loads(raw)
        except (TypeError, ValueError) as exc:
            raise AccountConfigInvalidError(f"key {self._key!r} is not valid JSON") from exc
        if not isinstance(payload, list):
            raise AccountConfigInvalidError(f"key {self._key!r} must hold a JSON array")

        accounts: list[UserAccountConfig] = []
        for index, entry in enumerate(payload):
            try:
                record = UserAccountRecord.model_validate(entry)
            except ValidationError as exc:
                # Log field locations only; entries carry API secrets
                logger.warning(
                    "skipping invalid account entry key=%s index=%d fields=%s",
                    self._key,
                    index,
                    [".".join(str(p) for p in err["loc"]) for err in exc.errors()],
                )
                continue
            accounts.append(record.to_domain())
        return accounts
