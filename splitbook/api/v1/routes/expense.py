from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from splitbook.core.dependencies import get_db
from splitbook.core.serialization import LedgerJSONResponse
from splitbook.schemas.expense import ExpenseCreate, ExpenseOut
from splitbook.schemas.group import MutationOut
from splitbook.services.expense_services import create_expense, delete_expense, edit_expense, get_expense_by_id

router = APIRouter()

@router.post("/{group_name}/expenses")
async def add_expense(group_name: str, data: ExpenseCreate, db: AsyncSession = Depends(get_db)):
    expense, warning = await create_expense(db, group_name, data)
    return LedgerJSONResponse(MutationOut(warning=warning, id=expense.ref).payload(), status_code=201)

@router.get("/{group_name}/expenses/{expense_id}")
async def fetch(group_name: str, expense_id: str, db: AsyncSession = Depends(get_db)):
    expense = await get_expense_by_id(db, group_name, expense_id)
    return LedgerJSONResponse(ExpenseOut.from_expense(expense).model_dump())

@router.put("/{group_name}/expenses/{expense_id}")
async def edit(group_name: str, expense_id: str, data: ExpenseCreate, db: AsyncSession = Depends(get_db)):
    _, warning = await edit_expense(db, group_name, expense_id, data)
    return LedgerJSONResponse(MutationOut(warning=warning).payload())

@router.delete("/{group_name}/expenses/{expense_id}")
async def del_expense(group_name: str, expense_id: str, db: AsyncSession = Depends(get_db)):
    await delete_expense(db, group_name, expense_id)
    return LedgerJSONResponse(MutationOut().payload())
