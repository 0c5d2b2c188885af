from __future__ import annotations

import logging
from typing import Any, Mapping

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from profgui import models
from profgui.constants import ROLE_PARENT, ROLE_STUDENT, ROLE_TEACHER, STATUS_PENDING
from profgui.crud import user as user_crud
from profgui.exceptions import ConflictError
from profgui.schemas import (
    ParentRegistration,
    StudentRegistration,
    TeacherRegistration,
    parse_payload,
)
from profgui.utils.security import get_password_hash

logger = logging.getLogger(__name__)

PHONE_TAKEN_MESSAGE = "Ce numéro de téléphone est déjà utilisé"
STUDENT_REGISTERED_MESSAGE = (
    "Inscription réussie. Votre compte est en attente de validation par l'administrateur."
)
TEACHER_REGISTERED_MESSAGE = (
    "Inscription réussie. Votre profil est en attente de validation par l'administrateur."
)


def _ensure_phone_available(db: Session, phone: str) -> None:
    if user_crud.get_user_by_phone(db, phone) is not None:
        raise ConflictError(PHONE_TAKEN_MESSAGE)


def _create_pending_user(db: Session, data, role: str) -> models.User:
    return user_crud.add_user(
        db,
        phone=data.phone,
        password_hash=get_password_hash(data.password),
        role=role,
        email=str(data.email) if data.email else None,
        status=STATUS_PENDING,
    )


def _commit_registration(db: Session, user: models.User) -> None:
    """Commit, translating a lost phone-uniqueness race into ConflictError."""
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.info("Registration rejected by unique phone constraint")
        raise ConflictError(PHONE_TAKEN_MESSAGE) from exc
    logger.info("Registered %s user_id=%s (pending approval)", user.role, user.id)


# ======================
# STUDENT
# ======================

def register_student(db: Session, payload: Mapping[str, Any]) -> str:
    data = parse_payload(StudentRegistration, payload)
    _ensure_phone_available(db, data.phone)

    try:
        user = _create_pending_user(db, data, ROLE_STUDENT)
        db.add(models.Student(
            user=user,
            first_name=data.first_name,
            last_name=data.last_name,
            city=data.city,
            level=data.level,
            subjects=list(data.subjects),
            course_type=data.course_type,
        ))
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError(PHONE_TAKEN_MESSAGE) from exc
    _commit_registration(db, user)
    return STUDENT_REGISTERED_MESSAGE


# ======================
# PARENT
# ======================

def register_parent(db: Session, payload: Mapping[str, Any]) -> str:
    data = parse_payload(ParentRegistration, payload)
    _ensure_phone_available(db, data.phone)

    try:
        user = _create_pending_user(db, data, ROLE_PARENT)
        parent = models.Parent(
            user=user,
            first_name=data.first_name,
            last_name=data.last_name,
            address=data.address,
        )
        db.add(parent)
        db.flush()

        for child in data.children:
            db.add(models.Child(
                parent=parent,
                first_name=child.first_name,
                last_name=child.last_name,
                level=child.level,
                subjects=list(child.subjects),
            ))
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError(PHONE_TAKEN_MESSAGE) from exc
    _commit_registration(db, user)
    return STUDENT_REGISTERED_MESSAGE


# ======================
# TEACHER
# ======================

def register_teacher(db: Session, payload: Mapping[str, Any]) -> str:
    data = parse_payload(TeacherRegistration, payload)
    _ensure_phone_available(db, data.phone)

    try:
        user = _create_pending_user(db, data, ROLE_TEACHER)
        db.add(models.Teacher(
            user=user,
            first_name=data.first_name,
            last_name=data.last_name,
            city=data.city,
            subjects=list(data.subjects),
            levels=list(data.levels),
            diploma=data.diploma,
            experience=data.experience or None,
            availability=data.availability,
            course_type=data.course_type,
            bio=data.bio or None,
        ))
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError(PHONE_TAKEN_MESSAGE) from exc
    _commit_registration(db, user)
    return TEACHER_REGISTERED_MESSAGE
