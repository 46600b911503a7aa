from sqlalchemy import Column, Integer, String, ForeignKey, Float, UniqueConstraint
from sqlalchemy.orm import relationship
from splitbook.db.session import Base

class Expense(Base):
    __tablename__ = "expenses"
    __table_args__ = (UniqueConstraint("group_id", "ref"),)

    id = Column(Integer, primary_key=True, index=True)
    group_id = Column(Integer, ForeignKey("groups.id"), nullable=False)
    # the id callers see, sequential within the group
    ref = Column(String, nullable=False)
    name = Column(String, nullable=False, default="")
    category = Column(String, nullable=False, default="")
    amount = Column(Float, nullable=False)
    payer = Column(String, nullable=False)
    date = Column(String, nullable=False, default="")

    group = relationship("Group", back_populates="expenses")
    splits = relationship(
        "ExpenseSplit",
        back_populates="expense",
        order_by="ExpenseSplit.position",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def members(self):
        return [s.member for s in self.splits]

    @property
    def shares(self):
        return [s.amount for s in self.splits]
