from sqlalchemy import Column, Integer, String
from expense_tracker.db.database import Base


class User(Base):
    __tablename__ = "users"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String, nullable=False, unique=True, index=True)
    email = Column(String, nullable=False, unique=True, index=True)
    password = Column(String, nullable=False)  # Stored as given, see DESIGN.md
