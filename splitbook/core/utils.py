import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from splitbook.core.errors import InvalidShareFormat, MembersEmpty, ShareCountMismatch

logger = logging.getLogger(__name__)

SHARE_TOLERANCE = 0.01
SETTLE_TOLERANCE = 0.005


def money(value: float) -> Decimal:
    # Fixed-point with two decimals, rounded the way printf("%.2f") rounds.
    amount = Decimal(f"{value:.2f}")
    if not amount:
        # drift such as -5.5e-17 would otherwise print as -0.00
        return abs(amount)
    return amount


def approx_equal(a: float, b: float, eps: float = SHARE_TOLERANCE) -> bool:
    return abs(a - b) <= eps


def split_pipe(raw: Optional[str]) -> List[str]:
    """Split a ``|``-delimited argument, dropping empty segments."""
    if not raw:
        return []
    return [part for part in raw.split("|") if part]


def parse_shares(tokens: Iterable) -> List[float]:
    shares = []
    for token in tokens:
        try:
            value = float(token)
        except (TypeError, ValueError):
            raise InvalidShareFormat(f"invalid share value {token!r}")
        if not math.isfinite(value):
            raise InvalidShareFormat(f"invalid share value {token!r}")
        shares.append(value)
    return shares


@dataclass
class ShareResolution:
    shares: List[float]
    total: float
    warning: Optional[str] = None


def resolve_shares(amount: float, members: Sequence[str], tokens: Optional[Sequence] = None) -> ShareResolution:
    """
    Work out what each member slot owes for one expense.

    Supplied tokens must all parse and match the member count. Without tokens
    the amount is split evenly. A total that drifts from the amount by more
    than SHARE_TOLERANCE is accepted but reported through ``warning``.
    """
    if not members:
        raise MembersEmpty()

    if tokens:
        shares = parse_shares(tokens)
        if len(shares) != len(members):
            raise ShareCountMismatch(
                f"{len(shares)} shares given for {len(members)} members"
            )
    else:
        equal_share = amount / len(members)
        shares = [equal_share] * len(members)

    total = sum(shares)
    warning = None
    if not approx_equal(total, amount):
        warning = f"total shares ({total:.2f}) do not match amount ({amount:.2f})"
        logger.warning(warning)

    return ShareResolution(shares=shares, total=total, warning=warning)


def compute_net_balances(members: Iterable[str], expenses: Iterable) -> Dict[str, float]:
    """
    Net position per member: what they paid minus what they owe.

    ``expenses`` are Expense rows (``payer``, ``amount`` and ordered
    ``splits``). Members with no activity stay at zero.
    """
    balance: Dict[str, float] = {m: 0.0 for m in members}

    for expense in expenses:
        for split in expense.splits:
            balance[split.member] = balance.get(split.member, 0.0) - split.amount
        balance[expense.payer] = balance.get(expense.payer, 0.0) + expense.amount

    return balance


def simplify_debts(net_map: Dict[str, float]) -> List[Tuple[str, str, float]]:
    """
    Greedy settlement plan over net balances.

    Debtors and creditors are each sorted by member name and matched with two
    cursors, so the same balances always produce the same plan. Balances
    within SETTLE_TOLERANCE of zero are treated as settled.

    The plan clears every balance and uses at most
    ``len(debtors) + len(creditors) - 1`` transfers, but it is not guaranteed
    to use the fewest transfers possible.
    """
    debtors = sorted(
        ([uid, -bal] for uid, bal in net_map.items() if bal < -SETTLE_TOLERANCE),
        key=lambda x: x[0],
    )
    creditors = sorted(
        ([uid, bal] for uid, bal in net_map.items() if bal > SETTLE_TOLERANCE),
        key=lambda x: x[0],
    )

    transfers: List[Tuple[str, str, float]] = []

    i = j = 0
    while i < len(debtors) and j < len(creditors):
        debtor = debtors[i]
        creditor = creditors[j]

        pay = min(debtor[1], creditor[1])

        if pay > SETTLE_TOLERANCE:
            transfers.append((debtor[0], creditor[0], pay))
            debtor[1] -= pay
            creditor[1] -= pay

        advanced = False
        if debtor[1] <= SETTLE_TOLERANCE:
            i += 1
            advanced = True
        if creditor[1] <= SETTLE_TOLERANCE:
            j += 1
            advanced = True

        if not advanced:
            raise RuntimeError(
                f"settlement stalled at {debtor[0]}={debtor[1]!r} / {creditor[0]}={creditor[1]!r}"
            )

    return transfers
