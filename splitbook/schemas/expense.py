from decimal import Decimal
from pydantic import BaseModel, Field
from typing import List, Union
from splitbook.core.utils import money

class ExpenseCreate(BaseModel):
    name: str = ""
    category: str = ""
    amount: float = Field(allow_inf_nan=False)
    payer: str
    members: List[str]
    # raw tokens, parsed by resolve_shares so bad values surface as InvalidShareFormat
    shares: List[Union[float, str]] = []
    date: str = ""

class ExpenseOut(BaseModel):
    id: str
    name: str
    category: str
    amount: Decimal
    payer: str
    members: List[str]
    shares: List[Decimal]
    date: str

    @classmethod
    def from_expense(cls, expense) -> "ExpenseOut":
        return cls(
            id=expense.ref,
            name=expense.name,
            category=expense.category,
            amount=money(expense.amount),
            payer=expense.payer,
            members=expense.members,
            shares=[money(s) for s in expense.shares],
            date=expense.date,
        )

class GroupExpensesOut(BaseModel):
    group: str
    expenses: List[ExpenseOut]

    @classmethod
    def from_expenses(cls, group: str, expenses) -> "GroupExpensesOut":
        return cls(group=group, expenses=[ExpenseOut.from_expense(e) for e in expenses])
