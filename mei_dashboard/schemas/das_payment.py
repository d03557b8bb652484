from decimal import Decimal
from pydantic import BaseModel, ConfigDict
from typing import List, Literal, Optional
from datetime import date, datetime

from mei_dashboard.models.enums import DasStatus

class DasPaymentRequest(BaseModel):
    amount: Optional[Decimal] = None

class DasPaymentRead(BaseModel):
    id: int
    reference_month: date
    amount: Optional[Decimal] = None
    status: DasStatus
    paid_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class DasPaymentCommand(BaseModel):
    """Escrita a ser aplicada no histórico de DAS.

    ``insert`` cria um registro novo para ``reference_month``;
    ``update`` altera em linha o registro ``payment_id``.
    """
    action: Literal["insert", "update"]
    payment_id: Optional[int] = None
    reference_month: date
    status: DasStatus
    amount: Optional[Decimal] = None
    paid_at: Optional[datetime] = None

class DasStatusRead(BaseModel):
    due_date: date
    days_until_due: int
    near_deadline: bool
    reference_month: date
    reference_label: str
    default_amount: Decimal
    current_payment: Optional[DasPaymentRead] = None
    history: List[DasPaymentRead]
