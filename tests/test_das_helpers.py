from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from types import SimpleNamespace

import pytest

from mei_dashboard.core.config import DAS_DEFAULT_AMOUNT
from mei_dashboard.models.enums import DasStatus
from mei_dashboard.utils.das_helpers import (
    create_pending,
    days_until_due,
    find_current_payment,
    is_near_deadline,
    mark_paid,
    next_due_date,
    reference_month_for,
)


def _payment(id, ref, status="paid"):
    return SimpleNamespace(id=id, reference_month=ref, status=status)


@pytest.mark.parametrize("day", range(1, 21))
def test_days_until_due_up_to_the_20th(day):
    assert days_until_due(date(2024, 6, day)) == 20 - day


def test_due_day_itself_is_zero_and_near():
    today = date(2024, 6, 20)
    assert days_until_due(today) == 0
    assert is_near_deadline(today) is True


def test_day_after_due_counts_to_next_month():
    # 21/06 -> 20/07
    assert days_until_due(date(2024, 6, 21)) == 29
    assert is_near_deadline(date(2024, 6, 21)) is False


def test_december_rolls_into_next_year():
    assert days_until_due(date(2024, 12, 31)) == 20
    assert next_due_date(date(2024, 12, 25)) == date(2025, 1, 20)


def test_short_month_after_due_day():
    # fevereiro bissexto: 21/02 -> 20/03
    assert days_until_due(date(2024, 2, 21)) == 28
    assert days_until_due(date(2023, 2, 28)) == 20


def test_days_after_due_match_calendar_and_stay_in_range():
    start = date(2023, 1, 1)
    for offset in range(800):
        today = start + timedelta(days=offset)
        days = days_until_due(today)
        assert 0 <= days <= 31
        assert today + timedelta(days=days) == next_due_date(today)
        assert (today + timedelta(days=days)).day == 20
        assert is_near_deadline(today) == (days <= 5)


def test_accepts_datetime():
    assert days_until_due(datetime(2024, 6, 18, 23, 59)) == 2


def test_next_due_date_same_month():
    assert next_due_date(date(2024, 6, 3)) == date(2024, 6, 20)


def test_reference_month_normalization():
    assert reference_month_for(date(2024, 6, 17)) == date(2024, 6, 1)
    assert reference_month_for("2024-06-30") == date(2024, 6, 1)
    assert reference_month_for(datetime(2024, 6, 30, 10, 0)) == date(2024, 6, 1)


def test_find_current_payment_matches_reference_month():
    payments = [_payment(1, "2024-06-01")]
    assert find_current_payment(payments, date(2024, 6, 1)) is payments[0]
    assert find_current_payment(payments, date(2024, 7, 1)) is None


def test_find_current_payment_with_date_values_and_mid_month_key():
    payments = [_payment(1, date(2024, 5, 1)), _payment(2, date(2024, 6, 1))]
    assert find_current_payment(payments, date(2024, 6, 15)).id == 2


def test_find_current_payment_returns_first_duplicate():
    payments = [_payment(7, date(2024, 6, 1)), _payment(8, date(2024, 6, 1))]
    assert find_current_payment(payments, date(2024, 6, 1)).id == 7


def test_find_current_payment_empty():
    assert find_current_payment([], date(2024, 6, 1)) is None


def test_mark_paid_updates_existing_record():
    now = datetime(2024, 6, 18, 12, 0, tzinfo=timezone.utc)
    existing = _payment(3, date(2024, 6, 1), status="pending")
    command = mark_paid(existing, Decimal("70.60"), date(2024, 6, 1), now=now)
    assert command.action == "update"
    assert command.payment_id == 3
    assert command.status == DasStatus.paid
    assert command.amount == Decimal("70.60")
    assert command.paid_at == now


def test_mark_paid_inserts_when_month_has_no_record():
    now = datetime(2024, 6, 18, 12, 0, tzinfo=timezone.utc)
    command = mark_paid(None, Decimal("70.60"), date(2024, 6, 18), now=now)
    assert command.action == "insert"
    assert command.payment_id is None
    assert command.reference_month == date(2024, 6, 1)
    assert command.status == DasStatus.paid
    assert command.paid_at == now


def test_mark_paid_uses_configured_default_amount():
    command = mark_paid(None, None, date(2024, 6, 1))
    assert command.amount == DAS_DEFAULT_AMOUNT
    assert command.paid_at is not None


def test_create_pending_only_when_month_is_free():
    command = create_pending(None, None, date(2024, 6, 9))
    assert command.action == "insert"
    assert command.status == DasStatus.pending
    assert command.amount == DAS_DEFAULT_AMOUNT
    assert command.paid_at is None

    assert create_pending(_payment(1, date(2024, 6, 1)), Decimal("66"), date(2024, 6, 9)) is None
