from pydantic import Field
from typing import Optional, List
from expense_tracker.schemas.base import CamelModel, RecordOut, UtcDatetime


class RoommateTxBase(CamelModel):
    user_email: Optional[str] = None
    amount: float = Field(..., allow_inf_nan=False)
    category: Optional[str] = None
    paid_by: Optional[str] = None
    split_among: List[str] = Field(default_factory=list)
    date: Optional[UtcDatetime] = None


class RoommateTxCreate(RoommateTxBase):
    pass


class RoommateTxOut(RoommateTxBase, RecordOut):
    pass
