from collections.abc import Iterable

from src.kb_accounts.domain.models import UserAccountConfig


def find_account(
    username: str, accounts: Iterable[UserAccountConfig]
) -> UserAccountConfig | None:
    """First entry whose username matches exactly, or None."""
    return next((acc for acc in accounts if acc.username == username), None)
