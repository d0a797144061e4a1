from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Single-tenant page credentials. Empty values are allowed so the app
    # imports without them; the exchange rejects the account at fetch time.
    KRAKEN_MASTER_API_KEY: str = ""
    KRAKEN_MASTER_API_SECRET: str = ""
    KRAKEN_SUB1_API_KEY: str = ""
    KRAKEN_SUB1_API_SECRET: str = ""
    KRAKEN_SUB2_API_KEY: str = ""
    KRAKEN_SUB2_API_SECRET: str = ""
    KRAKEN_SUB3_API_KEY: str = ""
    KRAKEN_SUB3_API_SECRET: str = ""
    KRAKEN_SUB4_API_KEY: str = ""
    KRAKEN_SUB4_API_SECRET: str = ""

    # Baseline for profit/loss on the single-tenant page (USD)
    INITIAL_STAKE: float = 5000.0

    # ccxt exchange id used for every sub-account
    EXCHANGE_ID: str = "krakenfutures"

    # Multi-tenant user records live in Redis as a JSON array under this key
    REDIS_URL: str = "redis://localhost:6379/0"
    ACCOUNTS_CONFIG_KEY: str = "accounts"

    # App
    APP_NAME: str = "Kraken Futures Balances"
    DEBUG: bool = False


settings = Settings()
