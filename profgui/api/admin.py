# profgui/api/admin.py
"""
Admin endpoints: account review, listings by role, stats and deletion.
Every route requires a session whose user has the admin role.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from profgui import models
from profgui.api.deps import require_admin
from profgui.constants import STATUS_APPROVED
from profgui.database import get_db
from profgui.exceptions import ProfGuiError, to_http_exception
from profgui.schemas import (
    AccountView,
    MessageResponse,
    ParentWithUser,
    StatsResponse,
    StatusUpdateResponse,
    StudentWithUser,
    TeacherWithUser,
)
from profgui.services import account_service, approval_service

router = APIRouter(prefix="/api/admin", tags=["Admin"])


# ─────────────────────────────────────────
# GET /api/admin/stats: Dashboard overview
# ─────────────────────────────────────────
@router.get("/stats", response_model=StatsResponse)
def get_dashboard_stats(
    admin: models.User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return account_service.get_stats(db)


# ─────────────────────────────────────────
# GET /api/admin/pending-users: Review queue
# ─────────────────────────────────────────
@router.get("/pending-users", response_model=List[AccountView])
def get_pending_users(
    admin: models.User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return account_service.list_pending_accounts(db)


# ─────────────────────────────────────────
# PATCH /api/admin/users/{user_id}/status
# ─────────────────────────────────────────
@router.patch("/users/{user_id}/status", response_model=StatusUpdateResponse)
def set_user_status(
    user_id: str,
    payload: Dict[str, Any] = Body(...),
    admin: models.User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    try:
        outcome = approval_service.set_status(db, user_id, payload.get("status"))
    except ProfGuiError as exc:
        raise to_http_exception(exc)

    if outcome.status == STATUS_APPROVED:
        return {
            "message": "Utilisateur approuvé",
            "temp_password": outcome.temp_password,
            "user_email": outcome.user_email,
            "user_phone": outcome.user_phone,
        }
    return {"message": "Utilisateur rejeté"}


# ─────────────────────────────────────────
# GET /api/admin/{students|parents|teachers}
# ─────────────────────────────────────────
@router.get("/students", response_model=List[StudentWithUser])
def get_students(
    admin: models.User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return account_service.list_students(db)


@router.get("/parents", response_model=List[ParentWithUser])
def get_parents(
    admin: models.User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return account_service.list_parents(db)


@router.get("/teachers", response_model=List[TeacherWithUser])
def get_teachers(
    admin: models.User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return account_service.list_teachers(db)


# ─────────────────────────────────────────
# DELETE /api/admin/{profile_type}/{profile_id}
# ─────────────────────────────────────────
@router.delete("/{profile_type}/{profile_id}", response_model=MessageResponse)
def delete_account(
    profile_type: str,
    profile_id: str,
    admin: models.User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Remove a profile and its account. Unknown ids succeed silently."""
    try:
        account_service.delete_profile(db, profile_type, profile_id)
    except ProfGuiError as exc:
        raise to_http_exception(exc)
    return {"message": "Compte supprimé"}
