import enum
from sqlalchemy import Column, Integer, String, Float, DateTime, Enum, Text
from expense_tracker.db.database import Base


class EntryType(str, enum.Enum):
    expense = "expense"
    income = "income"


class PersonalExpense(Base):
    __tablename__ = "personal_expenses"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    user_email = Column(String, nullable=False, index=True)
    type = Column(Enum(EntryType), nullable=False)
    amount = Column(Float, nullable=False)
    category = Column(String, nullable=True)
    category_name = Column(String, nullable=True)
    note = Column(Text, nullable=True)
    date = Column(DateTime, nullable=True)  # Naive UTC
