from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from sqlalchemy.orm import Session

from profgui import models
from profgui.config import settings
from profgui.constants import ROLE_ADMIN, STATUS_APPROVED, STATUS_PENDING, STATUS_REJECTED
from profgui.crud import user as user_crud
from profgui.exceptions import AuthError, ForbiddenError
from profgui.schemas import ChangePasswordRequest, LoginRequest, parse_payload
from profgui.utils.security import get_password_hash, verify_password

logger = logging.getLogger(__name__)

BAD_CREDENTIALS_MESSAGE = "Téléphone ou mot de passe incorrect"
PENDING_MESSAGE = "Votre compte est en attente de validation par l'administrateur."
REJECTED_MESSAGE = (
    "Votre compte a été rejeté. Contactez l'administrateur pour plus d'informations."
)


def authenticate(db: Session, phone: str, password: str) -> models.User:
    """Check credentials and approval status; return the user on success.

    Raises:
        AuthError: unknown phone or wrong password.
        ForbiddenError: the account is pending (non-admin) or rejected.
    """
    user = user_crud.get_user_by_phone(db, phone)
    if not user or not verify_password(password, user.password_hash):
        logger.info("Failed login attempt")
        raise AuthError(BAD_CREDENTIALS_MESSAGE)

    if user.status == STATUS_PENDING and user.role != ROLE_ADMIN:
        raise ForbiddenError(STATUS_PENDING, PENDING_MESSAGE)

    if user.status == STATUS_REJECTED:
        raise ForbiddenError(STATUS_REJECTED, REJECTED_MESSAGE)

    return user


def login(db: Session, payload: Mapping[str, Any]) -> models.User:
    data = parse_payload(LoginRequest, payload)
    return authenticate(db, data.phone, data.password)


def change_password(db: Session, user: models.User, new_password: Optional[str]) -> models.User:
    """Replace the user's password and clear the forced-change flag."""
    data = parse_payload(ChangePasswordRequest, {"new_password": new_password})

    user = user_crud.update_user_password(
        db,
        user,
        get_password_hash(data.new_password),
        must_change_password=False,
    )
    logger.info("Password changed for user_id=%s", user.id)
    return user


def seed_admin(
    db: Session,
    *,
    phone: Optional[str] = None,
    email: Optional[str] = None,
    password: Optional[str] = None,
) -> Optional[models.User]:
    """Create the first administrator unless its phone is already taken.

    Returns the new admin, or None when nothing was created.
    """
    phone = phone or settings.ADMIN_PHONE
    if user_crud.get_user_by_phone(db, phone) is not None:
        return None

    admin = user_crud.add_user(
        db,
        phone=phone,
        password_hash=get_password_hash(password or settings.ADMIN_PASSWORD),
        role=ROLE_ADMIN,
        email=email or settings.ADMIN_EMAIL,
        status=STATUS_APPROVED,
    )
    db.commit()
    db.refresh(admin)
    logger.info("Seeded administrator account user_id=%s", admin.id)
    return admin
