import logging
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from mei_dashboard.core.config import DAS_DEFAULT_AMOUNT, DAS_HISTORY_LIMIT
from mei_dashboard.core.security import get_current_user
from mei_dashboard.database import get_session
from mei_dashboard.models.das_payment import DasPayment
from mei_dashboard.schemas.das_payment import (
    DasPaymentCommand,
    DasPaymentRead,
    DasPaymentRequest,
    DasStatusRead,
)
from mei_dashboard.utils.das_helpers import (
    create_pending,
    days_until_due,
    find_current_payment,
    is_near_deadline,
    mark_paid,
    next_due_date,
    reference_month_for,
)
from mei_dashboard.utils.date_helpers import local_today
from mei_dashboard.utils.format_helpers import format_month_year

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/das", tags=["das"])


def load_das_history(session: Session, user_id: UUID, limit: int = DAS_HISTORY_LIMIT) -> List[DasPayment]:
    return session.exec(
        select(DasPayment)
        .where(DasPayment.user_id == user_id)
        .order_by(DasPayment.reference_month.desc())
        .limit(limit)
    ).all()


def apply_das_command(session: Session, user_id: UUID, command: DasPaymentCommand) -> DasPayment:
    if command.action == "update":
        payment = session.exec(
            select(DasPayment).where(DasPayment.id == command.payment_id, DasPayment.user_id == user_id)
        ).first()
        if not payment:
            raise HTTPException(status_code=404, detail="Registro de DAS não encontrado")
        payment.status = command.status
        payment.amount = command.amount
        payment.paid_at = command.paid_at
    else:
        payment = DasPayment(
            user_id=user_id,
            reference_month=command.reference_month,
            status=command.status,
            amount=command.amount,
            paid_at=command.paid_at,
        )

    session.add(payment)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise HTTPException(status_code=409, detail="Já existe um DAS registrado para este mês.")
    session.refresh(payment)
    return payment


@router.get("/status", response_model=DasStatusRead)
def get_das_status(
    tz: Optional[str] = Query(None, description="Fuso IANA, ex. America/Sao_Paulo"),
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    today = local_today(tz)
    reference_month = reference_month_for(today)
    history = load_das_history(session, user_id)

    current = find_current_payment(history, reference_month)

    return DasStatusRead(
        due_date=next_due_date(today),
        days_until_due=days_until_due(today),
        near_deadline=is_near_deadline(today),
        reference_month=reference_month,
        reference_label=format_month_year(reference_month),
        default_amount=DAS_DEFAULT_AMOUNT,
        current_payment=DasPaymentRead.model_validate(current) if current else None,
        history=[DasPaymentRead.model_validate(p) for p in history],
    )


@router.get("/history", response_model=List[DasPaymentRead])
def get_das_history(
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return load_das_history(session, user_id)


@router.post("/mark-paid", response_model=DasPaymentRead)
def mark_das_paid(
    payload: Optional[DasPaymentRequest] = None,
    tz: Optional[str] = Query(None),
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    reference_month = reference_month_for(local_today(tz))
    current = find_current_payment(load_das_history(session, user_id), reference_month)

    command = mark_paid(
        current,
        payload.amount if payload else None,
        reference_month,
        now=datetime.now(timezone.utc),
    )
    payment = apply_das_command(session, user_id, command)
    logger.info("DAS de %s marcado como pago (usuário %s)", reference_month, user_id)
    return payment


@router.post("/pending", response_model=DasPaymentRead)
def create_pending_das(
    payload: Optional[DasPaymentRequest] = None,
    tz: Optional[str] = Query(None),
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    reference_month = reference_month_for(local_today(tz))
    current = find_current_payment(load_das_history(session, user_id), reference_month)

    command = create_pending(current, payload.amount if payload else None, reference_month)
    if command is None:
        raise HTTPException(status_code=400, detail="O DAS deste mês já está registrado.")
    return apply_das_command(session, user_id, command)
