import logging
from typing import Optional, Tuple
from sqlalchemy.ext.asyncio import AsyncSession
from splitbook.core.errors import ExpenseNotFound, MemberNotInGroup
from splitbook.core.utils import ShareResolution, resolve_shares
from splitbook.models.expense import Expense
from splitbook.models.expense_split import ExpenseSplit
from splitbook.models.group import Group
from splitbook.schemas.expense import ExpenseCreate
from splitbook.services.group_services import get_group

logger = logging.getLogger(__name__)

def _validate_expense(group: Group, data: ExpenseCreate) -> ShareResolution:
    # Everything is checked before the group is touched.
    if data.members:
        known = set(group.member_names)
        outsiders = [m for m in [data.payer, *data.members] if m not in known]
        if outsiders:
            raise MemberNotInGroup(f"not in group {group.name!r}: {', '.join(outsiders)}")

    return resolve_shares(data.amount, data.members, data.shares)

def _build_splits(data: ExpenseCreate, resolution: ShareResolution):
    return [
        ExpenseSplit(position=pos, member=member, amount=share)
        for pos, (member, share) in enumerate(zip(data.members, resolution.shares))
    ]

def _get_expense(group: Group, expense_id: str) -> Expense:
    expense = group.find_expense(expense_id)

    if not expense:
        raise ExpenseNotFound(f"expense {expense_id!r} not found in group {group.name!r}")

    return expense

async def create_expense(db: AsyncSession, group_name: str, data: ExpenseCreate) -> Tuple[Expense, Optional[str]]:
    group = await get_group(db, group_name)
    resolution = _validate_expense(group, data)

    expense = Expense(
        ref=str(group.next_expense_id),
        name=data.name,
        category=data.category,
        amount=data.amount,
        payer=data.payer,
        date=data.date,
        splits=_build_splits(data, resolution),
    )
    group.next_expense_id += 1
    group.expenses.append(expense)

    await db.commit()
    logger.info("added expense %s to group %r", expense.ref, group_name)
    return expense, resolution.warning

async def edit_expense(db: AsyncSession, group_name: str, expense_id: str, data: ExpenseCreate) -> Tuple[Expense, Optional[str]]:
    group = await get_group(db, group_name)
    expense = _get_expense(group, expense_id)
    resolution = _validate_expense(group, data)

    expense.name = data.name
    expense.category = data.category
    expense.amount = data.amount
    expense.payer = data.payer
    expense.date = data.date
    expense.splits = _build_splits(data, resolution)

    await db.commit()
    logger.info("edited expense %s in group %r", expense_id, group_name)
    return expense, resolution.warning

async def delete_expense(db: AsyncSession, group_name: str, expense_id: str):
    group = await get_group(db, group_name)
    expense = _get_expense(group, expense_id)

    group.expenses.remove(expense)

    await db.commit()
    logger.info("deleted expense %s from group %r", expense_id, group_name)

async def get_expense_by_id(db: AsyncSession, group_name: str, expense_id: str) -> Expense:
    group = await get_group(db, group_name)
    return _get_expense(group, expense_id)
