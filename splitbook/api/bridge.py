"""
Function-call boundary for script and UI callers.

Every method takes plain string arguments (list arguments ``|``-delimited,
empty segments dropped) and returns JSON text. Validation failures come back
as ``{"error": "<Kind>"}``; they are never raised to the caller.
"""
import logging

from splitbook.core.errors import LedgerError
from splitbook.core.serialization import dump_json, error_payload
from splitbook.core.utils import split_pipe
from splitbook.db.session import Store
from splitbook.schemas.balances import GroupBalanceOut, GroupSettlementOut
from splitbook.schemas.expense import ExpenseCreate, GroupExpensesOut
from splitbook.schemas.group import GroupOut, MutationOut
from splitbook.services import balance_services, expense_services, group_services

logger = logging.getLogger(__name__)


def _expense_input(name, category, amount, payer, members, shares, date) -> ExpenseCreate:
    return ExpenseCreate(
        name=name,
        category=category,
        amount=amount,
        payer=payer,
        members=split_pipe(members),
        shares=split_pipe(shares),
        date=date,
    )


class LedgerBridge:
    def __init__(self, store: Store):
        self.store = store

    async def _call(self, operation, *args) -> str:
        async with self.store.session() as db:
            try:
                payload = await operation(db, *args)
            except LedgerError as err:
                logger.info("%s rejected: %s", operation.__name__, err.message)
                return dump_json(error_payload(err))
        return dump_json(payload)

    async def create_group(self, group_name: str, members: str) -> str:
        async def create(db):
            await group_services.create_group(db, group_name, split_pipe(members))
            return MutationOut().payload()

        return await self._call(create)

    async def list_groups(self) -> str:
        async def groups(db):
            names = await group_services.list_groups(db)
            return [GroupOut(name=n).model_dump() for n in names]

        return await self._call(groups)

    async def get_group_members(self, group_name: str) -> str:
        return await self._call(group_services.list_group_members, group_name)

    async def add_group_expense(self, group_name: str, name: str, category: str, amount: float,
                                payer: str, members: str, shares: str, date: str) -> str:
        async def add(db):
            data = _expense_input(name, category, amount, payer, members, shares, date)
            expense, warning = await expense_services.create_expense(db, group_name, data)
            return MutationOut(warning=warning, id=expense.ref).payload()

        return await self._call(add)

    async def edit_expense(self, group_name: str, expense_id: str, name: str, category: str, amount: float,
                           payer: str, members: str, shares: str, date: str) -> str:
        async def edit(db):
            data = _expense_input(name, category, amount, payer, members, shares, date)
            _, warning = await expense_services.edit_expense(db, group_name, expense_id, data)
            return MutationOut(warning=warning).payload()

        return await self._call(edit)

    async def delete_expense(self, group_name: str, expense_id: str) -> str:
        async def delete(db):
            await expense_services.delete_expense(db, group_name, expense_id)
            return MutationOut().payload()

        return await self._call(delete)

    async def show_group_expenses(self, group_name: str) -> str:
        async def show(db):
            expenses = await group_services.list_group_expenses(db, group_name)
            return GroupExpensesOut.from_expenses(group_name, expenses).model_dump()

        return await self._call(show)

    async def calculate_group_settlement(self, group_name: str) -> str:
        async def settle(db):
            transfers = await balance_services.get_group_settlement_plan(db, group_name)
            return GroupSettlementOut.from_transfers(group_name, transfers).payload()

        return await self._call(settle)

    async def get_group_balances(self, group_name: str) -> str:
        async def balances(db):
            net = await balance_services.get_group_net_balances(db, group_name)
            return GroupBalanceOut.from_net(group_name, net).model_dump()

        return await self._call(balances)
