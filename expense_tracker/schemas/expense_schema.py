from pydantic import Field
from typing import Optional
from expense_tracker.models.expenses import EntryType
from expense_tracker.schemas.base import CamelModel, RecordOut, UtcDatetime


class PersonalExpenseBase(CamelModel):
    user_email: str
    type: EntryType
    amount: float = Field(..., allow_inf_nan=False)
    category: Optional[str] = None
    category_name: Optional[str] = None
    note: Optional[str] = None
    date: Optional[UtcDatetime] = None


class PersonalExpenseCreate(PersonalExpenseBase):
    user_email: str = Field(..., min_length=1)


class PersonalExpenseOut(PersonalExpenseBase, RecordOut):
    pass
