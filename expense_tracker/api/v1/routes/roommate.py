from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from expense_tracker.db.database import get_db
from expense_tracker.services.roommate_service import get_roommate_transactions, add_roommate_transaction
from expense_tracker.schemas.base import MessageOut
from expense_tracker.schemas.roommate_schema import RoommateTxCreate, RoommateTxOut

router = APIRouter(prefix="/api/roommate", tags=["roommate"])


@router.get("", response_model=List[RoommateTxOut])
def get_transactions(db: Session = Depends(get_db)):
    """Get all roommate transactions, latest first"""
    return get_roommate_transactions(db)


@router.post("/add", response_model=MessageOut)
def add_transaction(tx_data: RoommateTxCreate, db: Session = Depends(get_db)):
    """Add a roommate transaction"""
    add_roommate_transaction(db, tx_data)
    return {"message": "Saved"}
