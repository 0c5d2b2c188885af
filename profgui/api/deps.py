from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyCookie
from sqlalchemy.orm import Session

from profgui import models
from profgui.config import settings
from profgui.constants import ROLE_ADMIN
from profgui.crud import user as user_crud
from profgui.database import get_db
from profgui.models.auth_session import AuthSession
from profgui.services.session_store import SessionStore

session_cookie = APIKeyCookie(name=settings.SESSION_COOKIE_NAME, auto_error=False)

NOT_AUTHENTICATED = "Non authentifié"
ACCESS_DENIED = "Accès refusé"


def get_session_store(db: Session = Depends(get_db)) -> SessionStore:
    return SessionStore(db)


def get_current_session(
    token: Optional[str] = Depends(session_cookie),
    store: SessionStore = Depends(get_session_store),
) -> AuthSession:
    record = store.resolve(token)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=NOT_AUTHENTICATED,
        )
    return record


def get_current_user_id(session: AuthSession = Depends(get_current_session)) -> str:
    return session.user_id


def get_current_user(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> models.User:
    user = user_crud.get_user(db, user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=NOT_AUTHENTICATED,
        )
    return user


# ─────────────────────────────────────────
# HELPER: Enforce admin access
# ─────────────────────────────────────────
def require_admin(current_user: models.User = Depends(get_current_user)) -> models.User:
    if (current_user.role or "").lower() != ROLE_ADMIN:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=ACCESS_DENIED)
    return current_user
