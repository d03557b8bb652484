import datetime as dt
import logging
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile
from fastapi.responses import Response
from sqlmodel import Session, select

from mei_dashboard.core.security import get_current_user
from mei_dashboard.database import get_session
from mei_dashboard.models.enums import TransactionType
from mei_dashboard.models.transaction import Transaction
from mei_dashboard.schemas.transaction import TransactionRead
from mei_dashboard.storage import LocalDocumentStore, get_document_store
from mei_dashboard.utils.date_helpers import local_today
from mei_dashboard.utils.format_helpers import transactions_to_csv
from mei_dashboard.utils.period_helpers import filter_transactions, parse_month_filter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transactions", tags=["transactions"])


def load_user_transactions(session: Session, user_id: UUID) -> List[Transaction]:
    return session.exec(
        select(Transaction)
        .where(Transaction.user_id == user_id)
        .order_by(Transaction.transaction_date.desc(), Transaction.id.desc())
    ).all()


def month_filter_or_400(month: Optional[str], tz: Optional[str] = None):
    if month == "current":
        today = local_today(tz)
        return today.year, today.month
    try:
        return parse_month_filter(month)
    except ValueError:
        raise HTTPException(status_code=400, detail="Mês inválido, use o formato AAAA-MM.")


@router.post("", response_model=TransactionRead)
@router.post("/", response_model=TransactionRead)
def create_transaction(
    type: TransactionType = Form(...),
    amount: Decimal = Form(...),
    transaction_date: dt.date = Form(...),
    category: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
    documents: LocalDocumentStore = Depends(get_document_store),
):
    if amount < 0:
        raise HTTPException(status_code=400, detail="O valor não pode ser negativo.")

    file_url = None
    if file is not None and file.filename:
        try:
            file_url = documents.save(user_id, file.filename, file.file.read())
        except OSError:
            logger.exception("Falha ao salvar documento do usuário %s", user_id)
            raise HTTPException(status_code=502, detail="Erro ao enviar o arquivo.")

    transaction = Transaction(
        user_id=user_id,
        type=type,
        amount=amount,
        transaction_date=transaction_date,
        category=category or None,
        description=description or None,
        file_url=file_url,
    )
    session.add(transaction)
    try:
        session.commit()
    except Exception:
        # Upload e inserção não são atômicos: o arquivo já salvo fica órfão
        if file_url:
            logger.warning("Documento %s ficou sem lançamento associado", file_url)
        raise
    session.refresh(transaction)

    logger.info("Lançamento %s criado para o usuário %s", transaction.id, user_id)
    return transaction


@router.get("", response_model=List[TransactionRead])
@router.get("/", response_model=List[TransactionRead])
def list_transactions(
    search: Optional[str] = Query(None),
    type: Optional[str] = Query(None, description="all, income ou expense"),
    month: Optional[str] = Query(None, description="AAAA-MM, 'current' ou 'all'"),
    tz: Optional[str] = Query(None, description="Fuso IANA, ex. America/Sao_Paulo"),
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    transactions = load_user_transactions(session, user_id)
    return filter_transactions(transactions, search=search, kind=type, month=month_filter_or_400(month, tz))


@router.get("/export")
def export_transactions(
    search: Optional[str] = Query(None),
    type: Optional[str] = Query(None),
    month: Optional[str] = Query(None),
    tz: Optional[str] = Query(None),
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    transactions = filter_transactions(
        load_user_transactions(session, user_id),
        search=search,
        kind=type,
        month=month_filter_or_400(month, tz),
    )
    filename = f"lancamentos_{local_today(tz).isoformat()}.csv"
    return Response(
        content=transactions_to_csv(transactions),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.delete("/{transaction_id}")
def delete_transaction(
    transaction_id: int,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    transaction = session.exec(
        select(Transaction).where(Transaction.id == transaction_id, Transaction.user_id == user_id)
    ).first()
    if not transaction:
        raise HTTPException(status_code=404, detail="Lançamento não encontrado")

    session.delete(transaction)
    session.commit()
    logger.info("Lançamento %s removido pelo usuário %s", transaction_id, user_id)
    return {"message": "Lançamento excluído"}
