import logging
from typing import Any, Callable, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from profgui.database import get_db
from profgui.exceptions import ProfGuiError, to_http_exception
from profgui.schemas import MessageResponse
from profgui.services import registration_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/register", tags=["Registration"])


def _run_registration(register: Callable[[Session, Dict[str, Any]], str], db: Session, payload: Dict[str, Any]):
    try:
        message = register(db, payload)
    except ProfGuiError as exc:
        raise to_http_exception(exc)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Registration failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Erreur lors de l'inscription",
        )
    return {"message": message}


@router.post("/student", status_code=status.HTTP_201_CREATED, response_model=MessageResponse)
def register_student(payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    """Create a pending student account."""
    return _run_registration(registration_service.register_student, db, payload)


@router.post("/parent", status_code=status.HTTP_201_CREATED, response_model=MessageResponse)
def register_parent(payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    """Create a pending parent account with at least one child."""
    return _run_registration(registration_service.register_parent, db, payload)


@router.post("/teacher", status_code=status.HTTP_201_CREATED, response_model=MessageResponse)
def register_teacher(payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    """Create a pending teacher profile."""
    return _run_registration(registration_service.register_teacher, db, payload)
