from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from typing import List, Optional
from expense_tracker.models.groups import Group
from expense_tracker.schemas.group_schema import GroupCreate
from expense_tracker.services.exceptions import Conflict


def create_group(db: Session, group_data: GroupCreate) -> Group:
    """Create a group under its caller-supplied id"""
    if get_group(db, group_data.id):
        raise Conflict(f"Group {group_data.id} already exists")

    group = Group(**group_data.model_dump())
    db.add(group)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict(f"Group {group_data.id} already exists")
    db.refresh(group)
    return group


def get_group(db: Session, group_id: str) -> Optional[Group]:
    """Get a group by its caller-supplied id"""
    return db.query(Group).filter(Group.id == group_id).first()


def get_all_groups(db: Session) -> List[Group]:
    """Get every group, most recently created first"""
    return db.query(Group).order_by(Group.pk.desc()).all()
