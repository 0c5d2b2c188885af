from fastapi import APIRouter

from profgui.constants import (
    ADMIN_WHATSAPP,
    CITIES,
    COURSE_TYPES,
    EDUCATION_LEVELS,
    SUBJECTS,
)

router = APIRouter(prefix="/api/reference", tags=["Reference"])


@router.get("")
def get_reference_data():
    """Catalogues used by the registration and search forms."""
    return {
        "levels": list(EDUCATION_LEVELS),
        "subjects": list(SUBJECTS),
        "cities": list(CITIES),
        "course_types": list(COURSE_TYPES),
        "admin_whatsapp": ADMIN_WHATSAPP,
    }
