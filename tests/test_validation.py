from datetime import date

import pytest

from app.core.errors import BadRequest, InvalidDate, InvalidType
from app.core.validation import parse_date, parse_transaction_type, require_non_blank


def test_parse_date_accepts_iso_dates_and_datetimes():
    assert parse_date("2026-02-06") == date(2026, 2, 6)
    assert parse_date("2026-02-06T10:30:00") == date(2026, 2, 6)
    assert parse_date("2026-02-06 10:30:00") == date(2026, 2, 6)


@pytest.mark.parametrize("value", ["06/02/2026", "2026-13-01", "yesterday", "", 20260206])
def test_parse_date_rejects_other_values(value):
    with pytest.raises(InvalidDate) as excinfo:
        parse_date(value)
    assert excinfo.value.detail == "Invalid date format. Use YYYY-MM-DD"


def test_parse_transaction_type_is_strict():
    assert parse_transaction_type("income") == "income"
    assert parse_transaction_type("expense") == "expense"
    for value in ("Income", "transfer", "", None, 1):
        with pytest.raises(InvalidType):
            parse_transaction_type(value)


def test_require_non_blank():
    assert require_non_blank("Checking", "name required") == "Checking"
    with pytest.raises(BadRequest):
        require_non_blank("   ", "name required")
