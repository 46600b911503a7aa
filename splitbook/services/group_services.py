import logging
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from splitbook.core.errors import GroupAlreadyExists, GroupNameEmpty, GroupNotFound
from splitbook.models.group import Group
from splitbook.models.group_member import GroupMember

logger = logging.getLogger(__name__)

async def get_group(db: AsyncSession, name: str) -> Group:
    q = select(Group).where(Group.name == name)
    res = await db.execute(q)
    group = res.scalar_one_or_none()

    if not group:
        raise GroupNotFound(f"group {name!r} not found")

    return group

async def create_group(db: AsyncSession, name: str, members: List[str]) -> Group:
    if not name:
        raise GroupNameEmpty()

    q = select(Group.id).where(Group.name == name)
    existing = await db.execute(q)

    if existing.scalar_one_or_none() is not None:
        raise GroupAlreadyExists(f"group {name!r} already exists")

    group = Group(
        name=name,
        next_expense_id=1,
        members=[GroupMember(position=pos, name=m) for pos, m in enumerate(members)],
        expenses=[],
    )
    db.add(group)

    await db.commit()
    logger.info("created group %r with %d members", name, len(members))
    return group

async def list_groups(db: AsyncSession) -> List[str]:
    q = select(Group.name).order_by(Group.name)
    res = await db.execute(q)
    return list(res.scalars().all())

async def list_group_members(db: AsyncSession, group_name: str) -> List[str]:
    group = await get_group(db, group_name)
    return group.member_names

async def list_group_expenses(db: AsyncSession, group_name: str):
    group = await get_group(db, group_name)
    return list(group.expenses)
