import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Response
from sqlalchemy.orm import Session

from profgui import models
from profgui.api.deps import (
    get_current_user,
    get_current_user_id,
    get_session_store,
    session_cookie,
)
from profgui.config import settings
from profgui.database import get_db
from profgui.exceptions import ProfGuiError, to_http_exception
from profgui.schemas import AccountView, LoginResponse, MessageResponse
from profgui.services import account_service, auth_service
from profgui.services.session_store import SessionStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Authentication"])


# ===== LOGIN ENDPOINT =====

@router.post("/login", response_model=LoginResponse)
def login(
    response: Response,
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
):
    """Verify phone + password and open a cookie session."""
    try:
        user = auth_service.login(db, payload)
    except ProfGuiError as exc:
        raise to_http_exception(exc)

    issued = store.create(user.id)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=issued.token,
        max_age=settings.SESSION_TTL_HOURS * 3600,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )
    return {
        "message": "Connexion réussie",
        "user": {
            "id": user.id,
            "role": user.role,
            "must_change_password": bool(user.must_change_password),
        },
    }


# ===== LOGOUT ENDPOINT =====

@router.post("/logout", response_model=MessageResponse)
def logout(
    response: Response,
    token: Optional[str] = Depends(session_cookie),
    store: SessionStore = Depends(get_session_store),
):
    store.revoke(token)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"message": "Déconnexion réussie"}


# ===== PASSWORD =====

@router.post("/change-password", response_model=MessageResponse)
def change_password(
    payload: Dict[str, Any] = Body(...),
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Replace the caller's password; clears the forced-change flag."""
    try:
        auth_service.change_password(db, current_user, payload.get("new_password"))
    except ProfGuiError as exc:
        raise to_http_exception(exc)
    return {"message": "Mot de passe modifié avec succès"}


# ===== CURRENT USER =====

@router.get("/user", response_model=AccountView)
def get_current_account(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    try:
        return account_service.get_own_account(db, user_id)
    except ProfGuiError as exc:
        raise to_http_exception(exc)
