from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import Session

from profgui.constants import ROLE_ADMIN, STATUS_APPROVED, STATUS_PENDING, REVIEW_DECISIONS
from profgui.crud import user as user_crud
from profgui.exceptions import NotFoundError, ValidationError
from profgui.utils.security import generate_temporary_password, get_password_hash

logger = logging.getLogger(__name__)


@dataclass
class ReviewOutcome:
    status: str
    # Set on approval only; the admin passes it to the user by WhatsApp/SMS.
    temp_password: Optional[str] = None
    user_email: Optional[str] = None
    user_phone: Optional[str] = None


def set_status(db: Session, user_id: str, status: Optional[str]) -> ReviewOutcome:
    """Move a pending account to approved or rejected.

    Approval replaces the password with a temporary one and forces a
    change at next login. Both target states are final.

    Raises:
        ValidationError: unknown target status, or the account was already reviewed.
        NotFoundError: no user with that id.
    """
    if status not in REVIEW_DECISIONS:
        raise ValidationError("Statut invalide")

    user = user_crud.get_user(db, user_id)
    if not user:
        raise NotFoundError("Utilisateur non trouvé")

    if user.role == ROLE_ADMIN or user.status != STATUS_PENDING:
        raise ValidationError("Ce compte a déjà été traité")

    if status == STATUS_APPROVED:
        temp_password = generate_temporary_password()
        user.password_hash = get_password_hash(temp_password)
        user.must_change_password = True
        user.status = STATUS_APPROVED
        db.commit()
        logger.info("Approved user_id=%s (%s)", user.id, user.role)
        return ReviewOutcome(
            status=STATUS_APPROVED,
            temp_password=temp_password,
            user_email=user.email,
            user_phone=user.phone,
        )

    user_crud.update_user_status(db, user, status)
    logger.info("Rejected user_id=%s (%s)", user.id, user.role)
    return ReviewOutcome(status=status)
