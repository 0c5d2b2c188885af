from __future__ import annotations

import logging
from typing import List

from sqlalchemy.orm import Session

from profgui import models, schemas
from profgui.constants import (
    PROFILE_TYPES,
    ROLE_PARENT,
    ROLE_STUDENT,
    ROLE_TEACHER,
    STATUS_PENDING,
)
from profgui.crud import profile as profile_crud
from profgui.crud import user as user_crud
from profgui.exceptions import NotFoundError, ValidationError
from profgui.services.session_store import SessionStore

logger = logging.getLogger(__name__)


# ======================
# ACCOUNT VIEWS
# ======================

def build_account_view(db: Session, user: models.User) -> schemas.AccountView:
    """User plus its role profile; children are listed for parents only."""
    profile = None
    children = None

    if user.role == ROLE_STUDENT:
        student = profile_crud.get_student_by_user_id(db, user.id)
        if student:
            profile = schemas.StudentProfile.model_validate(student)
    elif user.role == ROLE_PARENT:
        parent = profile_crud.get_parent_by_user_id(db, user.id)
        if parent:
            profile = schemas.ParentProfile.model_validate(parent)
            children = [
                schemas.ChildOut.model_validate(child)
                for child in profile_crud.get_children_by_parent_id(db, parent.id)
            ]
    elif user.role == ROLE_TEACHER:
        teacher = profile_crud.get_teacher_by_user_id(db, user.id)
        if teacher:
            profile = schemas.TeacherProfile.model_validate(teacher)

    return schemas.AccountView(
        user=schemas.UserPublic.model_validate(user),
        profile=profile,
        children=children,
    )


def get_own_account(db: Session, user_id: str) -> schemas.AccountView:
    user = user_crud.get_user(db, user_id)
    if not user:
        raise NotFoundError("Utilisateur non trouvé")
    return build_account_view(db, user)


# ======================
# ADMIN LISTINGS
# ======================

def list_pending_accounts(db: Session) -> List[schemas.AccountView]:
    return [
        build_account_view(db, user)
        for user in user_crud.get_users_by_status(db, STATUS_PENDING)
    ]


def list_students(db: Session) -> List[schemas.StudentWithUser]:
    return [
        schemas.StudentWithUser.model_validate(student)
        for student in profile_crud.get_all_students(db)
    ]


def list_parents(db: Session) -> List[schemas.ParentWithUser]:
    return [
        schemas.ParentWithUser.model_validate(parent)
        for parent in profile_crud.get_all_parents(db)
    ]


def list_teachers(db: Session) -> List[schemas.TeacherWithUser]:
    return [
        schemas.TeacherWithUser.model_validate(teacher)
        for teacher in profile_crud.get_all_teachers(db)
    ]


def get_stats(db: Session) -> schemas.StatsResponse:
    return schemas.StatsResponse(
        total_students=profile_crud.count_profiles(db, models.Student),
        total_parents=profile_crud.count_profiles(db, models.Parent),
        total_teachers=profile_crud.count_profiles(db, models.Teacher),
        pending_users=user_crud.count_users_by_status(db, STATUS_PENDING),
    )


# ======================
# DELETION
# ======================

def _find_profile(db: Session, profile_type: str, profile_id: str):
    if profile_type == "students":
        return profile_crud.get_student(db, profile_id)
    if profile_type == "parents":
        return profile_crud.get_parent(db, profile_id)
    return profile_crud.get_teacher(db, profile_id)


def delete_profile(db: Session, profile_type: str, profile_id: str) -> bool:
    """Delete a profile together with its owning user.

    Parents lose their children first. An unknown id is a no-op and
    returns False.
    """
    if profile_type not in PROFILE_TYPES:
        raise ValidationError("Type de profil invalide")

    profile = _find_profile(db, profile_type, profile_id)
    if profile is None:
        return False

    user_id = profile.user_id
    try:
        if profile_type == "parents":
            profile_crud.delete_children_by_parent_id(db, profile.id)
            db.expire(profile, ["children"])
        db.delete(profile)

        user = user_crud.get_user(db, user_id)
        if user is not None:
            db.delete(user)
        SessionStore(db).revoke_all(user_id)
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Failed to delete %s profile_id=%s", profile_type, profile_id)
        raise

    logger.info("Deleted %s profile_id=%s and user_id=%s", profile_type, profile_id, user_id)
    return True

