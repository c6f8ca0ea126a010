from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from expense_tracker.db.database import get_db
from expense_tracker.services.expense_service import get_user_expenses, add_personal_expense
from expense_tracker.schemas.base import MessageOut
from expense_tracker.schemas.expense_schema import PersonalExpenseCreate, PersonalExpenseOut

router = APIRouter(prefix="/api/personal", tags=["personal"])


@router.post("/add", response_model=MessageOut)
def add_expense(expense_data: PersonalExpenseCreate, db: Session = Depends(get_db)):
    """Add a personal expense or income entry"""
    add_personal_expense(db, expense_data)
    return {"message": "Saved"}


@router.get("/{email}", response_model=List[PersonalExpenseOut])
def get_expenses(email: str, db: Session = Depends(get_db)):
    """Get all personal entries of a user"""
    return get_user_expenses(db, email)
