from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from splitbook.db.session import Base

class Group(Base):
    __tablename__ = 'groups'

    id = Column(Integer, primary_key=True, index = True)
    name = Column(String, unique=True, nullable=False)
    # never decremented, so deleted expense ids are not handed out again
    next_expense_id = Column(Integer, nullable=False, default=1)

    members = relationship(
        "GroupMember",
        back_populates="group",
        order_by="GroupMember.position",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    expenses = relationship(
        "Expense",
        back_populates="group",
        order_by="Expense.id",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def member_names(self):
        return [m.name for m in self.members]

    def find_expense(self, ref: str):
        for expense in self.expenses:
            if expense.ref == ref:
                return expense
        return None
