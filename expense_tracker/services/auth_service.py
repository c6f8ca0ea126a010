from sqlalchemy.orm import Session
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from expense_tracker.models.users import User
from expense_tracker.schemas.user_schema import UserRegister, UserLogin, UserPublic
from expense_tracker.services.exceptions import Conflict, Unauthorized


def register_user(db: Session, user_data: UserRegister) -> User:
    """Create a user unless the username or email is already taken"""
    existing = db.query(User).filter(
        or_(User.username == user_data.username, User.email == user_data.email)
    ).first()
    if existing:
        raise Conflict("User exists")

    # Password is kept exactly as submitted
    user = User(
        username=user_data.username,
        email=user_data.email,
        password=user_data.password
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration
        db.rollback()
        raise Conflict("User exists")
    db.refresh(user)
    return user


def login_user(db: Session, credentials: UserLogin) -> UserPublic:
    """Match username and password exactly, return the public view of the user"""
    user = db.query(User).filter(
        User.username == credentials.username,
        User.password == credentials.password
    ).first()
    if not user:
        raise Unauthorized()
    return UserPublic(username=user.username, email=user.email)
