"""Single-tenant credentials, read from Settings (env / .env)."""

from config.settings import Settings
from src.kb_accounts.domain.models import build_credentials, key_pairs_from
from src.kb_balance.domain.models import AccountCredential


def credentials_from_settings(settings: Settings) -> list[AccountCredential]:
    return build_credentials(key_pairs_from(settings))
