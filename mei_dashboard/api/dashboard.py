from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session

from mei_dashboard.api.recurring_debts import load_recurring_debts
from mei_dashboard.api.transactions import load_user_transactions
from mei_dashboard.core.security import get_current_user
from mei_dashboard.database import get_session
from mei_dashboard.schemas.dashboard import DashboardSummary, MonthPointRead
from mei_dashboard.schemas.transaction import TransactionRead
from mei_dashboard.utils.date_helpers import local_today
from mei_dashboard.utils.period_helpers import (
    forecast,
    monthly_totals,
    recurring_total,
    trailing_months,
)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

RECENT_TRANSACTIONS = 5


@router.get("/summary", response_model=DashboardSummary)
def get_dashboard_summary(
    year: Optional[int] = Query(None, ge=1, le=9999),
    month: Optional[int] = Query(None, ge=1, le=12),
    months: int = Query(6, ge=1, le=24, description="Meses no gráfico de evolução"),
    tz: Optional[str] = Query(None, description="Fuso IANA, ex. America/Sao_Paulo"),
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    today = local_today(tz)
    if (year is None) != (month is None):
        raise HTTPException(status_code=400, detail="Informe ano e mês juntos.")
    anchor = today.replace(year=year, month=month, day=1) if year is not None else today

    transactions = load_user_transactions(session, user_id)
    active_debts = load_recurring_debts(session, user_id, active_only=True)

    totals = monthly_totals(transactions, anchor.year, anchor.month)
    history = trailing_months(transactions, anchor, months)

    return DashboardSummary(
        year=anchor.year,
        month=anchor.month,
        total_income=totals.income,
        total_expense=totals.expense,
        balance=totals.balance,
        recurring_total=recurring_total(active_debts),
        forecast=forecast(totals.balance, active_debts),
        history=[MonthPointRead(**point._asdict()) for point in history],
        recent_transactions=[TransactionRead.model_validate(tx) for tx in transactions[:RECENT_TRANSACTIONS]],
    )
