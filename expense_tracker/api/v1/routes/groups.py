from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from expense_tracker.db.database import get_db
from expense_tracker.services.group_service import create_group, get_all_groups
from expense_tracker.schemas.base import MessageOut
from expense_tracker.schemas.group_schema import GroupCreate, GroupOut

router = APIRouter(prefix="/api/groups", tags=["groups"])


@router.get("", response_model=List[GroupOut])
def get_groups(db: Session = Depends(get_db)):
    """Get all groups, newest first"""
    return get_all_groups(db)


@router.post("/create", response_model=MessageOut)
def create_new_group(group_data: GroupCreate, db: Session = Depends(get_db)):
    """Create a new group"""
    create_group(db, group_data)
    return {"message": "Group Created"}
