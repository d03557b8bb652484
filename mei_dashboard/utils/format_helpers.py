import datetime as dt
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from mei_dashboard.models.enums import TransactionType

SHORT_MONTHS = ("jan.", "fev.", "mar.", "abr.", "mai.", "jun.",
                "jul.", "ago.", "set.", "out.", "nov.", "dez.")
LONG_MONTHS = ("janeiro", "fevereiro", "março", "abril", "maio", "junho",
               "julho", "agosto", "setembro", "outubro", "novembro", "dezembro")

CSV_HEADER = ("Data", "Tipo", "Valor", "Categoria", "Descrição")


def short_month_name(month: int) -> str:
    return SHORT_MONTHS[month - 1]


def long_month_name(month: int) -> str:
    return LONG_MONTHS[month - 1]


def format_currency(value) -> str:
    """Formata em real: 1234.5 -> 'R$ 1.234,50'."""
    amount = Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    text = f"{abs(amount):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {text}"


def format_date(value) -> str:
    if isinstance(value, str):
        value = dt.date.fromisoformat(value[:10])
    return value.strftime("%d/%m/%Y")


def format_month_year(value: dt.date) -> str:
    return f"{long_month_name(value.month)} de {value.year}"


def transaction_type_label(kind) -> str:
    kind = kind.value if isinstance(kind, TransactionType) else kind
    return "Entrada" if kind == TransactionType.income.value else "Saída"


def transactions_to_csv(transactions: Iterable) -> str:
    # Exportação para leitura humana: os valores já saem formatados e
    # não são escapados, então a vírgula decimal quebra a coluna.
    rows = [CSV_HEADER]
    for tx in transactions:
        rows.append((
            format_date(tx.transaction_date),
            transaction_type_label(tx.type),
            format_currency(tx.amount),
            tx.category or "",
            tx.description or "",
        ))
    return "\n".join(",".join(row) for row in rows)
