from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from splitbook.db.session import Base

class GroupMember(Base):
    __tablename__ = "group_members"

    id = Column(Integer, primary_key=True, index=True)
    group_id = Column(Integer, ForeignKey("groups.id"), nullable=False)
    position = Column(Integer, nullable=False)
    name = Column(String, nullable=False)

    group = relationship("Group", back_populates="members")
