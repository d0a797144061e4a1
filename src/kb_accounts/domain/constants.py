"""Fixed sub-account layout shared by the env config and the stored user records.

Each slot pairs a display name with the prefix of its credential keys:
  <prefix>_API_KEY / <prefix>_API_SECRET
"""

ACCOUNT_SLOTS: tuple[tuple[str, str], ...] = (
    ("Master", "KRAKEN_MASTER"),
    ("Subaccount 1", "KRAKEN_SUB1"),
    ("Subaccount 2", "KRAKEN_SUB2"),
    ("Subaccount 3", "KRAKEN_SUB3"),
    ("Subaccount 4", "KRAKEN_SUB4"),
)

ACCOUNT_NAMES: tuple[str, ...] = tuple(name for name, _ in ACCOUNT_SLOTS)
