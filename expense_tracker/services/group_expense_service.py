import logging
from sqlalchemy.orm import Session
from typing import List, Optional
from expense_tracker.models.groups import Group, GroupExpense
from expense_tracker.schemas.group_schema import GroupExpenseCreate

logger = logging.getLogger(__name__)

JUST_ADDED = "Just now"
CURRENCY_SYMBOL = "₹"


def format_amount(amount: float) -> str:
    """Render whole amounts without a fractional part (250.0 -> '250')"""
    if float(amount).is_integer():
        return str(int(amount))
    return str(amount)


def build_last_message(paid_by: Optional[str], amount: float) -> str:
    return f"{paid_by} added {CURRENCY_SYMBOL}{format_amount(amount)}"


def get_group_expenses(db: Session, group_id: str) -> List[GroupExpense]:
    """Get all expenses of a group, latest date first"""
    return (
        db.query(GroupExpense)
        .filter(GroupExpense.group_id == group_id)
        .order_by(GroupExpense.date.desc().nulls_last(), GroupExpense.pk.desc())
        .all()
    )


def add_group_expense(db: Session, expense_data: GroupExpenseCreate) -> GroupExpense:
    """
    Store a group expense and refresh the summary of its group.

    The expense is committed first, the group summary second. The two
    commits are independent: a failure in between leaves the expense
    stored with a stale summary. An expense whose group does not exist
    is still stored.

    Args:
        db: Database session
        expense_data: Expense fields as submitted

    Returns:
        GroupExpense: The stored expense
    """
    expense = GroupExpense(**expense_data.model_dump())
    db.add(expense)
    db.commit()
    db.refresh(expense)

    updated = touch_group_summary(db, expense.group_id, expense.paid_by, expense.amount)
    if not updated:
        logger.debug(f"No group matched {expense.group_id}, summary left unchanged")
    return expense


def touch_group_summary(db: Session, group_id: str, paid_by: Optional[str], amount: float) -> int:
    """Overwrite lastMsg/time of the matching group, return the number of groups updated"""
    updated = db.query(Group).filter(Group.id == group_id).update(
        {
            Group.last_msg: build_last_message(paid_by, amount),
            Group.time: JUST_ADDED,
        },
        synchronize_session=False
    )
    db.commit()
    return updated
