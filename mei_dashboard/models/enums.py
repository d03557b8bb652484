from enum import Enum

class TransactionType(str, Enum):
    income = "income"
    expense = "expense"

class DasStatus(str, Enum):
    pending = "pending"
    paid = "paid"
    overdue = "overdue"
