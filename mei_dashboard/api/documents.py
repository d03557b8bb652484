from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import FileResponse
from sqlmodel import Session, select

from mei_dashboard.api.transactions import month_filter_or_400, load_user_transactions
from mei_dashboard.core.security import get_current_user
from mei_dashboard.database import get_session
from mei_dashboard.models.transaction import Transaction
from mei_dashboard.schemas.transaction import DocumentListRead, TransactionRead
from mei_dashboard.storage import LocalDocumentStore, get_document_store
from mei_dashboard.utils.period_helpers import document_months, filter_transactions

router = APIRouter(prefix="/documents", tags=["documents"])


@router.get("", response_model=DocumentListRead)
@router.get("/", response_model=DocumentListRead)
def list_documents(
    search: Optional[str] = Query(None),
    month: Optional[str] = Query(None, description="AAAA-MM ou 'all'"),
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    with_files = [tx for tx in load_user_transactions(session, user_id) if tx.file_url]
    return DocumentListRead(
        months=document_months(with_files),
        items=[
            TransactionRead.model_validate(tx)
            for tx in filter_transactions(with_files, search=search, month=month_filter_or_400(month))
        ],
    )


@router.get("/{transaction_id}")
def download_document(
    transaction_id: int,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
    documents: LocalDocumentStore = Depends(get_document_store),
):
    transaction = session.exec(
        select(Transaction).where(Transaction.id == transaction_id, Transaction.user_id == user_id)
    ).first()
    if not transaction or not transaction.file_url:
        raise HTTPException(status_code=404, detail="Documento não encontrado")

    try:
        path = documents.open_path(transaction.file_url)
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail="Documento não encontrado")

    return FileResponse(path, filename=path.name)
