from datetime import date, datetime
from typing import Any, Optional

from app.core.errors import BadRequest, InvalidDate, InvalidType

TRANSACTION_TYPES = ("income", "expense")


def parse_transaction_type(value: Any) -> str:
    """Return the type unchanged when it is exactly ``income`` or ``expense``."""
    if not isinstance(value, str) or value not in TRANSACTION_TYPES:
        raise InvalidType()
    return value


def parse_date(value: Any) -> date:
    """Parse a calendar date.

    Accepts:
      - "2026-02-06"
      - "2026-02-06T10:30:00" / "2026-02-06 10:30:00" -> date part

    Raises InvalidDate on anything else.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDate()

    s = value.strip()
    try:
        return date.fromisoformat(s)
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(s).date()
    except ValueError:
        raise InvalidDate() from None


def is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def require_non_blank(value: Optional[str], detail: str) -> str:
    if is_blank(value):
        raise BadRequest(detail)
    return value
