from typing import List, Optional

from sqlalchemy.orm import Session

from profgui import models
from profgui.constants import STATUS_PENDING
from profgui.utils.phone import normalize_phone


def get_user(db: Session, user_id: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.id == user_id).first()


def get_user_by_phone(db: Session, phone: str) -> Optional[models.User]:
    return db.query(models.User).filter(
        models.User.phone_key == normalize_phone(phone)
    ).first()


def add_user(
    db: Session,
    *,
    phone: str,
    password_hash: str,
    role: str,
    email: Optional[str] = None,
    status: str = STATUS_PENDING,
) -> models.User:
    """Stage a new user in the session; the caller commits."""
    user = models.User(
        email=email,
        phone=phone,
        phone_key=normalize_phone(phone),
        password_hash=password_hash,
        role=role,
        status=status,
        must_change_password=False,
    )
    db.add(user)
    db.flush()
    return user


def update_user_status(db: Session, user: models.User, status: str) -> models.User:
    user.status = status
    db.commit()
    db.refresh(user)
    return user


def update_user_password(
    db: Session,
    user: models.User,
    password_hash: str,
    must_change_password: bool = False,
) -> models.User:
    user.password_hash = password_hash
    user.must_change_password = must_change_password
    db.commit()
    db.refresh(user)
    return user


def get_users_by_status(db: Session, status: str) -> List[models.User]:
    return (
        db.query(models.User)
        .filter(models.User.status == status)
        .order_by(models.User.created_at.asc())
        .all()
    )


def count_users_by_status(db: Session, status: str) -> int:
    return db.query(models.User).filter(models.User.status == status).count()
