from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from smarteam.models.user import User, ROLE_ADMIN, ROLE_USER


class DuplicateKey(Exception):
    """Raised when a user with the same email already exists."""

    def __init__(self, email: str) -> None:
        super().__init__(f"User already exists: {email}")
        self.email = email


def find_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def find_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def find_admin(db: Session) -> Optional[User]:
    return db.query(User).filter(User.role == ROLE_ADMIN).order_by(User.id).first()


def list_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.id).all()


def create_user(db: Session, email: str, password_hash: str, role: str = ROLE_USER) -> User:
    """Insert a user, relying on the unique email index to settle races.

    A pre-check keeps the common case cheap; the commit is still the
    authoritative "insert if absent" when two requests race on one email.
    """
    if find_by_email(db, email) is not None:
        raise DuplicateKey(email)

    user = User(email=email, hashed_password=password_hash, role=role)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise DuplicateKey(email) from exc
    db.refresh(user)
    return user
