from sqlalchemy.orm import Session
from typing import List
from expense_tracker.models.expenses import PersonalExpense
from expense_tracker.schemas.expense_schema import PersonalExpenseCreate


def get_user_expenses(db: Session, email: str) -> List[PersonalExpense]:
    """Get all personal entries of a user in insertion order"""
    return (
        db.query(PersonalExpense)
        .filter(PersonalExpense.user_email == email)
        .order_by(PersonalExpense.pk.asc())
        .all()
    )


def add_personal_expense(db: Session, expense_data: PersonalExpenseCreate) -> PersonalExpense:
    """Store a personal expense or income entry as given"""
    expense = PersonalExpense(**expense_data.model_dump())
    db.add(expense)
    db.commit()
    db.refresh(expense)
    return expense
