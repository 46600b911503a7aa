from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from splitbook.core.dependencies import get_db
from splitbook.core.serialization import LedgerJSONResponse
from splitbook.schemas.balances import GroupSettlementOut
from splitbook.schemas.expense import GroupExpensesOut
from splitbook.schemas.group import GroupCreate, GroupOut, MutationOut
from splitbook.services.balance_services import get_group_settlement_plan
from splitbook.services.group_services import create_group, list_groups, list_group_members, list_group_expenses

router = APIRouter()

@router.post("/", description="create new group")
async def create_new_group(data: GroupCreate, db: AsyncSession = Depends(get_db)):
    await create_group(db, data.name, data.members)
    return LedgerJSONResponse(MutationOut().payload(), status_code=201)

@router.get("/", description="list groups by name")
async def all_groups(db: AsyncSession = Depends(get_db)):
    names = await list_groups(db)
    return LedgerJSONResponse([GroupOut(name=n).model_dump() for n in names])

@router.get("/{group_name}/group-members")
async def group_members(group_name: str, db: AsyncSession = Depends(get_db)):
    return LedgerJSONResponse(await list_group_members(db, group_name))

@router.get("/{group_name}/expenses", description="get all expenses of the group")
async def fetch_expenses(group_name: str, db: AsyncSession = Depends(get_db)):
    expenses = await list_group_expenses(db, group_name)
    return LedgerJSONResponse(GroupExpensesOut.from_expenses(group_name, expenses).model_dump())

@router.get("/{group_name}/settlements")
async def group_settlements(group_name: str, db: AsyncSession = Depends(get_db)):
    transfers = await get_group_settlement_plan(db, group_name)
    return LedgerJSONResponse(GroupSettlementOut.from_transfers(group_name, transfers).payload())
