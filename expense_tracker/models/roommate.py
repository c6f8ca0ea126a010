from sqlalchemy import Column, Integer, String, Float, DateTime, JSON
from expense_tracker.db.database import Base


class RoommateTx(Base):
    __tablename__ = "roommate_transactions"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    user_email = Column(String, nullable=True, index=True)
    amount = Column(Float, nullable=False)
    category = Column(String, nullable=True)
    paid_by = Column(String, nullable=True)
    split_among = Column(JSON, nullable=False, default=list)  # Ordered list of emails, not validated
    date = Column(DateTime, nullable=True, index=True)  # Naive UTC
