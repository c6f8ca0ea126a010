from sqlalchemy import Column, Integer, String, Float, DateTime, Text
from expense_tracker.db.database import Base


class Group(Base):
    __tablename__ = "groups"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, nullable=False, unique=True, index=True)  # Caller-supplied identifier
    name = Column(String, nullable=False)
    last_msg = Column(String, nullable=True)
    time = Column(String, nullable=True)
    color = Column(String, nullable=True)
    created_by = Column(String, nullable=True)  # Owner email


class GroupExpense(Base):
    __tablename__ = "group_expenses"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    group_id = Column(String, nullable=False, index=True)  # Reference to groups.id (no FK constraint)
    amount = Column(Float, nullable=False)
    category = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    paid_by = Column(String, nullable=True)
    date = Column(DateTime, nullable=True, index=True)  # Naive UTC
