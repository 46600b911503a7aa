from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from splitbook.core.dependencies import get_db
from splitbook.core.serialization import LedgerJSONResponse
from splitbook.schemas.balances import GroupBalanceOut
from splitbook.services.balance_services import get_group_net_balances

router = APIRouter()

@router.get("/{group_name}/balances")
async def group_balances(group_name: str, db: AsyncSession = Depends(get_db)):
    net = await get_group_net_balances(db, group_name)
    return LedgerJSONResponse(GroupBalanceOut.from_net(group_name, net).model_dump())
