"""Agregações por mês sobre lançamentos já carregados.

Meses são sempre 1-12 (janeiro = 1), como em ``date.month``.
"""
import datetime as dt
from decimal import Decimal
from typing import Iterable, List, NamedTuple, Optional, Tuple, Union

from mei_dashboard.models.enums import TransactionType
from mei_dashboard.utils.format_helpers import short_month_name

ZERO = Decimal("0")


class MonthlyTotals(NamedTuple):
    income: Decimal
    expense: Decimal
    balance: Decimal


class MonthPoint(NamedTuple):
    label: str
    year: int
    month: int
    income: Decimal
    expense: Decimal


def _to_decimal(value) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def _tx_date(tx) -> dt.date:
    value = tx.transaction_date
    if isinstance(value, str):
        return dt.date.fromisoformat(value[:10])
    if isinstance(value, dt.datetime):
        return value.date()
    return value


def _tx_type(tx) -> str:
    kind = tx.type
    return kind.value if isinstance(kind, TransactionType) else kind


def in_month(tx, year: int, month: int) -> bool:
    d = _tx_date(tx)
    return d.year == year and d.month == month


def monthly_totals(transactions: Iterable, year: int, month: int) -> MonthlyTotals:
    income = ZERO
    expense = ZERO
    for tx in transactions:
        if not in_month(tx, year, month):
            continue
        if _tx_type(tx) == TransactionType.income.value:
            income += _to_decimal(tx.amount)
        elif _tx_type(tx) == TransactionType.expense.value:
            expense += _to_decimal(tx.amount)
    return MonthlyTotals(income=income, expense=expense, balance=income - expense)


def recurring_total(debts: Iterable) -> Decimal:
    return sum((_to_decimal(d.amount) for d in debts if d.is_active), ZERO)


def forecast(balance: Decimal, debts: Iterable) -> Decimal:
    """Saldo do mês menos os débitos recorrentes ativos (inativos não contam)."""
    return _to_decimal(balance) - recurring_total(debts)


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def trailing_months(transactions: Iterable, anchor: dt.date, count: int) -> List[MonthPoint]:
    """Um ponto por mês, do mais antigo ao mês de ``anchor``.

    Meses sem lançamentos entram zerados para o eixo do gráfico ficar contínuo.
    """
    transactions = list(transactions)
    points = []
    for i in range(count - 1, -1, -1):
        year, month = shift_month(anchor.year, anchor.month, -i)
        totals = monthly_totals(transactions, year, month)
        points.append(MonthPoint(
            label=short_month_name(month),
            year=year,
            month=month,
            income=totals.income,
            expense=totals.expense,
        ))
    return points


def parse_month_filter(value: Optional[str]) -> Optional[Tuple[int, int]]:
    """'YYYY-MM' -> (ano, mês). Vazio ou 'all' -> None (sem filtro)."""
    if not value or value == "all":
        return None
    year, month = value.split("-")[:2]
    return int(year), int(month)


def _matches_search(tx, search: Optional[str]) -> bool:
    if not search:
        return True
    term = search.lower()
    return any(term in field.lower() for field in (tx.description, tx.category) if field)


def filter_transactions(
    transactions: Iterable,
    search: Optional[str] = None,
    kind: Union[TransactionType, str, None] = None,
    month: Optional[Tuple[int, int]] = None,
) -> list:
    if isinstance(kind, TransactionType):
        kind = kind.value
    result = []
    for tx in transactions:
        if kind and kind != "all" and _tx_type(tx) != kind:
            continue
        if month and not in_month(tx, *month):
            continue
        if not _matches_search(tx, search):
            continue
        result.append(tx)
    return result


def document_months(transactions: Iterable) -> List[str]:
    """Meses (YYYY-MM) que têm documento anexado, mais recente primeiro."""
    months = {_tx_date(tx).strftime("%Y-%m") for tx in transactions if tx.file_url}
    return sorted(months, reverse=True)
