from pydantic import Field
from typing import Optional
from expense_tracker.schemas.base import CamelModel, RecordOut, UtcDatetime


class GroupBase(CamelModel):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    last_msg: Optional[str] = None
    time: Optional[str] = None
    color: Optional[str] = None
    created_by: Optional[str] = None  # Owner email


class GroupCreate(GroupBase):
    pass


class GroupOut(GroupBase, RecordOut):
    pass


class GroupExpenseBase(CamelModel):
    group_id: str = Field(..., min_length=1)
    amount: float = Field(..., allow_inf_nan=False)
    category: Optional[str] = None
    description: Optional[str] = None
    paid_by: Optional[str] = None
    date: Optional[UtcDatetime] = None


class GroupExpenseCreate(GroupExpenseBase):
    pass


class GroupExpenseOut(GroupExpenseBase, RecordOut):
    pass
