from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from expense_tracker.db.database import get_db
from expense_tracker.services.group_expense_service import get_group_expenses, add_group_expense
from expense_tracker.schemas.base import MessageOut
from expense_tracker.schemas.group_schema import GroupExpenseCreate, GroupExpenseOut

router = APIRouter(prefix="/api/groups", tags=["group expenses"])


@router.get("/{group_id}/expenses", response_model=List[GroupExpenseOut])
def get_group_expenses_list(group_id: str, db: Session = Depends(get_db)):
    """Get all expenses for a group, latest first"""
    return get_group_expenses(db, group_id)


@router.post("/expense/add", response_model=MessageOut)
def add_new_group_expense(expense_data: GroupExpenseCreate, db: Session = Depends(get_db)):
    """Add an expense to a group and refresh the group's last message"""
    add_group_expense(db, expense_data)
    return {"message": "Expense Added"}
