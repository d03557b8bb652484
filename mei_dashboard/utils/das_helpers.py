"""Regras do lembrete do DAS MEI.

O DAS vence sempre no dia 20. Tudo aqui é função pura sobre datas e listas
já carregadas; nenhuma função acessa o banco.
"""
import datetime as dt
from decimal import Decimal
from typing import Iterable, Optional, Union

from mei_dashboard.core.config import DAS_DEFAULT_AMOUNT
from mei_dashboard.models.enums import DasStatus
from mei_dashboard.schemas.das_payment import DasPaymentCommand

DAS_DUE_DAY = 20
DAS_NEAR_DEADLINE_DAYS = 5


def _due_date_next_month(today: dt.date) -> dt.date:
    if today.month == 12:
        return dt.date(today.year + 1, 1, DAS_DUE_DAY)
    return dt.date(today.year, today.month + 1, DAS_DUE_DAY)


def next_due_date(today: dt.date) -> dt.date:
    """Próximo dia 20: o do mês corrente até o dia 20, senão o do mês seguinte."""
    if today.day <= DAS_DUE_DAY:
        return today.replace(day=DAS_DUE_DAY)
    return _due_date_next_month(today)


def days_until_due(today: dt.date) -> int:
    if isinstance(today, dt.datetime):
        today = today.date()
    if today.day <= DAS_DUE_DAY:
        return DAS_DUE_DAY - today.day
    return (_due_date_next_month(today) - today).days


def is_near_deadline(today: dt.date) -> bool:
    days = days_until_due(today)
    return 0 <= days <= DAS_NEAR_DEADLINE_DAYS


def reference_month_for(value: Union[dt.date, dt.datetime, str]) -> dt.date:
    """Normaliza para o dia 1 do mês (chave canônica do mês de referência)."""
    if isinstance(value, str):
        value = dt.date.fromisoformat(value[:10])
    if isinstance(value, dt.datetime):
        value = value.date()
    return value.replace(day=1)


def find_current_payment(payments: Iterable, reference_month: Union[dt.date, str]):
    """Primeiro registro cujo mês de referência coincide com ``reference_month``.

    Se houver duplicados, vale o primeiro na ordem de iteração.
    """
    key = reference_month_for(reference_month)
    for payment in payments:
        ref = payment.reference_month
        if isinstance(ref, str):
            ref = dt.date.fromisoformat(ref[:10])
        elif isinstance(ref, dt.datetime):
            ref = ref.date()
        if ref == key:
            return payment
    return None


def mark_paid(
    existing,
    amount: Optional[Decimal],
    reference_month: dt.date,
    now: Optional[dt.datetime] = None,
) -> DasPaymentCommand:
    now = now or dt.datetime.now(dt.timezone.utc)
    if amount is None:
        amount = DAS_DEFAULT_AMOUNT
    if existing is not None:
        return DasPaymentCommand(
            action="update",
            payment_id=existing.id,
            reference_month=reference_month_for(existing.reference_month),
            status=DasStatus.paid,
            amount=amount,
            paid_at=now,
        )
    return DasPaymentCommand(
        action="insert",
        reference_month=reference_month_for(reference_month),
        status=DasStatus.paid,
        amount=amount,
        paid_at=now,
    )


def create_pending(
    existing, amount: Optional[Decimal], reference_month: dt.date
) -> Optional[DasPaymentCommand]:
    # Só cria pendente se o mês ainda não tem registro
    if existing is not None:
        return None
    if amount is None:
        amount = DAS_DEFAULT_AMOUNT
    return DasPaymentCommand(
        action="insert",
        reference_month=reference_month_for(reference_month),
        status=DasStatus.pending,
        amount=amount,
    )
