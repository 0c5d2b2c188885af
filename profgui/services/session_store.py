from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from profgui.models.auth_session import AuthSession
from profgui.utils.security import (
    create_session_token,
    decode_session_token,
    session_ttl,
    utcnow,
)

logger = logging.getLogger(__name__)


@dataclass
class IssuedSession:
    token: str
    session_id: str
    user_id: str
    expires_at: datetime


class SessionStore:
    """Login sessions kept in the database and handed out as signed tokens.

    A token is honoured only while its session row exists and has not
    expired, so logout takes effect server-side.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, user_id: str) -> IssuedSession:
        session_id = secrets.token_urlsafe(32)
        expires_at = utcnow() + session_ttl()
        self.db.add(AuthSession(id=session_id, user_id=user_id, expires_at=expires_at))
        self.db.commit()
        token = create_session_token(user_id, session_id, expires_at)
        return IssuedSession(
            token=token,
            session_id=session_id,
            user_id=user_id,
            expires_at=expires_at,
        )

    def resolve(self, token: Optional[str]) -> Optional[AuthSession]:
        if not token:
            return None
        claims = decode_session_token(token)
        if claims is None:
            return None
        record = self.db.query(AuthSession).filter(AuthSession.id == claims["sid"]).first()
        if record is None or record.user_id != claims["sub"]:
            return None
        if record.expires_at <= utcnow():
            self.db.delete(record)
            self.db.commit()
            return None
        return record

    def revoke(self, token: Optional[str]) -> bool:
        record = self.resolve(token)
        if record is None:
            return False
        self.db.delete(record)
        self.db.commit()
        return True

    def revoke_all(self, user_id: str) -> int:
        """Drop every session of a user; the caller commits."""
        removed = self.db.query(AuthSession).filter(
            AuthSession.user_id == user_id
        ).delete(synchronize_session=False)
        if removed:
            logger.info("Revoked %s session(s) for user_id=%s", removed, user_id)
        return int(removed)
