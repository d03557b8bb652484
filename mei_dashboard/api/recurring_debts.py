import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session, select

from mei_dashboard.core.security import get_current_user
from mei_dashboard.database import get_session
from mei_dashboard.models.recurring_debt import RecurringDebt
from mei_dashboard.schemas.recurring_debt import RecurringDebtCreate, RecurringDebtRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recurring-debts", tags=["recurring_debts"])


def load_recurring_debts(session: Session, user_id: UUID, active_only: bool = False) -> List[RecurringDebt]:
    query = select(RecurringDebt).where(RecurringDebt.user_id == user_id)
    if active_only:
        query = query.where(RecurringDebt.is_active == True)  # noqa: E712
    return session.exec(query.order_by(RecurringDebt.due_day, RecurringDebt.id)).all()


def _get_owned_debt(session: Session, debt_id: int, user_id: UUID) -> RecurringDebt:
    debt = session.exec(
        select(RecurringDebt).where(RecurringDebt.id == debt_id, RecurringDebt.user_id == user_id)
    ).first()
    if not debt:
        raise HTTPException(status_code=404, detail="Débito recorrente não encontrado")
    return debt


@router.post("", response_model=RecurringDebtRead)
@router.post("/", response_model=RecurringDebtRead)
def create_recurring_debt(
    debt_data: RecurringDebtCreate,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    # due_day não é validado contra o tamanho do mês
    debt = RecurringDebt(**debt_data.model_dump(), user_id=user_id)
    session.add(debt)
    session.commit()
    session.refresh(debt)
    logger.info("Débito recorrente %s criado para o usuário %s", debt.id, user_id)
    return debt


@router.get("", response_model=List[RecurringDebtRead])
@router.get("/", response_model=List[RecurringDebtRead])
def list_recurring_debts(
    active_only: bool = Query(False),
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return load_recurring_debts(session, user_id, active_only=active_only)


@router.put("/{debt_id}", response_model=RecurringDebtRead)
def update_recurring_debt(
    debt_id: int,
    debt_data: RecurringDebtCreate,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    debt = _get_owned_debt(session, debt_id, user_id)

    debt.name = debt_data.name
    debt.amount = debt_data.amount
    debt.due_day = debt_data.due_day
    debt.category = debt_data.category
    debt.is_active = debt_data.is_active

    session.add(debt); session.commit(); session.refresh(debt)
    return debt


@router.post("/{debt_id}/toggle", response_model=RecurringDebtRead)
def toggle_recurring_debt(
    debt_id: int,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    debt = _get_owned_debt(session, debt_id, user_id)
    debt.is_active = not debt.is_active
    session.add(debt); session.commit(); session.refresh(debt)
    return debt


@router.delete("/{debt_id}")
def delete_recurring_debt(
    debt_id: int,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    debt = _get_owned_debt(session, debt_id, user_id)
    session.delete(debt); session.commit()
    logger.info("Débito recorrente %s removido pelo usuário %s", debt_id, user_id)
    return {"message": "Débito recorrente excluído"}
