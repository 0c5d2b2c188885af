from __future__ import annotations

from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from profgui import models
from profgui.constants import FILTER_ALL
from profgui.crud import profile as profile_crud


def _active_filter(value: Optional[str]) -> Optional[str]:
    """Map absent, blank and the "all" sentinel to no filter."""
    if value is None:
        return None
    if not value.strip() or value == FILTER_ALL:
        return None
    return value


def _joined(values: Iterable[str]) -> str:
    # Stored items never contain commas, so this is the delimited form.
    return ",".join(values or [])


def _contains(values: Iterable[str], needle: str) -> bool:
    return needle.lower() in _joined(values).lower()


def list_approved_teachers(
    db: Session,
    *,
    city: Optional[str] = None,
    subject: Optional[str] = None,
    level: Optional[str] = None,
) -> List[models.Teacher]:
    """Approved teachers matching every given filter.

    city is an exact match; subject and level are case-insensitive
    substring matches over the comma-joined lists.
    """
    city = _active_filter(city)
    subject = _active_filter(subject)
    level = _active_filter(level)

    teachers = profile_crud.get_approved_teachers(db, city=city)

    if subject:
        teachers = [t for t in teachers if _contains(t.subjects, subject)]
    if level:
        teachers = [t for t in teachers if _contains(t.levels, level)]
    return teachers
