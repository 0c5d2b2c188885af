from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from profgui.database import get_db
from profgui.schemas import TeacherListing
from profgui.services import directory_service

router = APIRouter(prefix="/api/teachers", tags=["Directory"])


@router.get("", response_model=List[TeacherListing])
def list_teachers(
    city: Optional[str] = None,
    subject: Optional[str] = None,
    level: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """Public directory of approved teachers.

    Each filter is optional and "all" disables it.
    """
    teachers = directory_service.list_approved_teachers(
        db, city=city, subject=subject, level=level
    )
    return [TeacherListing.model_validate(t) for t in teachers]
