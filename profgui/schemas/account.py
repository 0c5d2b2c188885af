from datetime import datetime
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ======================
# USER (IDENTITY)
# ======================

class UserPublic(BaseModel):
    id: str
    email: Optional[str] = None
    phone: str
    role: str
    status: str
    must_change_password: bool = False
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


# ======================
# PROFILES (tagged by kind)
# ======================

class StudentProfile(BaseModel):
    kind: Literal["student"] = "student"
    id: str
    user_id: str
    first_name: str
    last_name: str
    city: str
    level: str
    subjects: List[str]
    course_type: str

    model_config = ConfigDict(from_attributes=True)


class ParentProfile(BaseModel):
    kind: Literal["parent"] = "parent"
    id: str
    user_id: str
    first_name: str
    last_name: str
    address: str

    model_config = ConfigDict(from_attributes=True)


class TeacherProfile(BaseModel):
    kind: Literal["teacher"] = "teacher"
    id: str
    user_id: str
    first_name: str
    last_name: str
    city: str
    subjects: List[str]
    levels: List[str]
    diploma: str
    experience: Optional[str] = None
    availability: str
    course_type: str
    bio: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


Profile = Annotated[
    Union[StudentProfile, ParentProfile, TeacherProfile],
    Field(discriminator="kind"),
]


class ChildOut(BaseModel):
    id: str
    parent_id: str
    first_name: str
    last_name: str
    level: str
    subjects: List[str]

    model_config = ConfigDict(from_attributes=True)


# ======================
# ACCOUNT VIEWS
# ======================

class AccountView(BaseModel):
    """A user with its role profile, as shown to the owner or to admins."""

    user: UserPublic
    profile: Optional[Profile] = None
    children: Optional[List[ChildOut]] = None


class StudentWithUser(StudentProfile):
    user: Optional[UserPublic] = None


class ParentWithUser(ParentProfile):
    user: Optional[UserPublic] = None
    children: List[ChildOut] = []


class TeacherWithUser(TeacherProfile):
    user: Optional[UserPublic] = None


class UserContact(BaseModel):
    """Public fields of a teacher's account, shown in the directory."""

    id: str
    email: Optional[str] = None
    phone: str
    role: str
    status: str

    model_config = ConfigDict(from_attributes=True)


class TeacherListing(TeacherProfile):
    user: Optional[UserContact] = None


class StatsResponse(BaseModel):
    total_students: int
    total_parents: int
    total_teachers: int
    pending_users: int
