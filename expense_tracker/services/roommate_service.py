from sqlalchemy.orm import Session
from typing import List
from expense_tracker.models.roommate import RoommateTx
from expense_tracker.schemas.roommate_schema import RoommateTxCreate


def get_roommate_transactions(db: Session) -> List[RoommateTx]:
    """Get all roommate transactions, latest date first"""
    return (
        db.query(RoommateTx)
        .order_by(RoommateTx.date.desc().nulls_last(), RoommateTx.pk.desc())
        .all()
    )


def add_roommate_transaction(db: Session, tx_data: RoommateTxCreate) -> RoommateTx:
    """Store a roommate transaction, splitAmong kept in the given order"""
    tx = RoommateTx(**tx_data.model_dump())
    db.add(tx)
    db.commit()
    db.refresh(tx)
    return tx
