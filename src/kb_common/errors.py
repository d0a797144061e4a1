"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: User lookup
  9xxx: System

Per-account exchange failures are not AppErrors; they are caught by the
balance service and rendered inline next to the account name.
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: User lookup ---

class UserNotFoundError(AppError):
    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(1001, f"User not found: {username}", 404)


# --- 9xxx: System ---

class AccountConfigInvalidError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(9001, f"Account configuration is invalid: {detail}", 502)
