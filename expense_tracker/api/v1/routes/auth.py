from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from expense_tracker.db.database import get_db
from expense_tracker.services.auth_service import register_user, login_user
from expense_tracker.schemas.base import MessageOut
from expense_tracker.schemas.user_schema import UserRegister, UserLogin, LoginOut

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/register", response_model=MessageOut)
def register(user_data: UserRegister, db: Session = Depends(get_db)):
    """Register a new user"""
    register_user(db, user_data)
    return {"message": "Registered"}


@router.post("/login", response_model=LoginOut)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Log in with username and password"""
    user = login_user(db, credentials)
    return {"message": "Success", "user": user}
