import logging
from typing import Dict, List, Tuple
from sqlalchemy.ext.asyncio import AsyncSession
from splitbook.core.utils import compute_net_balances, simplify_debts
from splitbook.services.group_services import get_group

logger = logging.getLogger(__name__)

async def get_group_net_balances(db: AsyncSession, group_name: str) -> Dict[str, float]:
    group = await get_group(db, group_name)
    return compute_net_balances(group.member_names, group.expenses)

async def get_group_settlement_plan(db: AsyncSession, group_name: str) -> List[Tuple[str, str, float]]:
    net = await get_group_net_balances(db, group_name)
    transfers = simplify_debts(net)

    logger.debug("settlement for %r: %s", group_name, transfers)
    return transfers
