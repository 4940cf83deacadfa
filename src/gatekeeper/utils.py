from datetime import UTC, datetime


def now() -> datetime:
    return datetime.now(UTC)


def mask_token(token: str) -> str:
    """Shorten a session token for log output."""
    return f"{token[:6]}..." if len(token) > 6 else "***"
