from typing import List, Literal, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

CourseType = Literal["domicile", "en_ligne", "les_deux"]

# ======================
# SHARED VALIDATORS
# ======================


def _blank_email_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _reject_commas(values: List[str]) -> List[str]:
    for item in values:
        if "," in item:
            raise ValueError("Les matières et niveaux ne peuvent pas contenir de virgule")
    return values


class AccountRegistration(BaseModel):
    first_name: str = Field(..., min_length=2)
    last_name: str = Field(..., min_length=2)
    phone: str = Field(..., min_length=9)
    email: Optional[EmailStr] = None
    password: str = Field(..., min_length=6)

    @field_validator("email", mode="before")
    @classmethod
    def blank_email(cls, value):
        return _blank_email_to_none(value)


# ======================
# STUDENT
# ======================

class StudentRegistration(AccountRegistration):
    city: str = Field(..., min_length=1)
    level: str = Field(..., min_length=1)
    subjects: List[str] = Field(..., min_length=1)
    course_type: CourseType

    @field_validator("subjects")
    @classmethod
    def no_commas(cls, value):
        return _reject_commas(value)


# ======================
# PARENT
# ======================

class ChildRegistration(BaseModel):
    first_name: str = Field(..., min_length=2)
    last_name: str = Field(..., min_length=2)
    level: str = Field(..., min_length=1)
    subjects: List[str] = Field(..., min_length=1)

    @field_validator("subjects")
    @classmethod
    def no_commas(cls, value):
        return _reject_commas(value)


class ParentRegistration(AccountRegistration):
    address: str = Field(..., min_length=5)
    children: List[ChildRegistration] = Field(..., min_length=1)


# ======================
# TEACHER
# ======================

class TeacherRegistration(AccountRegistration):
    # Teachers are contacted by email after approval.
    email: EmailStr
    city: str = Field(..., min_length=1)
    subjects: List[str] = Field(..., min_length=1)
    levels: List[str] = Field(..., min_length=1)
    diploma: str = Field(..., min_length=2)
    experience: Optional[str] = None
    availability: str = Field(..., min_length=5)
    course_type: CourseType
    bio: Optional[str] = None

    @field_validator("subjects", "levels")
    @classmethod
    def no_commas(cls, value):
        return _reject_commas(value)
