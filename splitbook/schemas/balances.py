from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Tuple
from splitbook.core.utils import money

class Settlement(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(alias="from")
    to: str
    amount: Decimal

class GroupSettlementOut(BaseModel):
    group: str
    settlements: List[Settlement]

    @classmethod
    def from_transfers(cls, group: str, transfers: List[Tuple[str, str, float]]) -> "GroupSettlementOut":
        return cls(
            group=group,
            settlements=[Settlement(from_=f, to=t, amount=money(a)) for f, t, a in transfers],
        )

    def payload(self) -> dict:
        return self.model_dump(by_alias=True)

class MemberBalance(BaseModel):
    member: str
    balance: Decimal

class GroupBalanceOut(BaseModel):
    group: str
    balances: List[MemberBalance]

    @classmethod
    def from_net(cls, group: str, net: Dict[str, float]) -> "GroupBalanceOut":
        return cls(
            group=group,
            balances=[MemberBalance(member=m, balance=money(b)) for m, b in net.items()],
        )
