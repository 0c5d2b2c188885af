# profgui/schemas/__init__.py

# Registration schemas
from .registration import (
    StudentRegistration,
    ParentRegistration,
    ChildRegistration,
    TeacherRegistration,
)

# Auth schemas
from .auth import (
    LoginRequest,
    LoginResponse,
    LoginUser,
    ChangePasswordRequest,
    StatusUpdateResponse,
    MessageResponse,
)

# Account / directory schemas
from .account import (
    UserPublic,
    StudentProfile,
    ParentProfile,
    TeacherProfile,
    ChildOut,
    AccountView,
    StudentWithUser,
    ParentWithUser,
    TeacherWithUser,
    UserContact,
    TeacherListing,
    StatsResponse,
)

from .validation import parse_payload

__all__ = [
    "StudentRegistration",
    "ParentRegistration",
    "ChildRegistration",
    "TeacherRegistration",
    "LoginRequest",
    "LoginResponse",
    "LoginUser",
    "ChangePasswordRequest",
    "StatusUpdateResponse",
    "MessageResponse",
    "UserPublic",
    "StudentProfile",
    "ParentProfile",
    "TeacherProfile",
    "ChildOut",
    "AccountView",
    "StudentWithUser",
    "ParentWithUser",
    "TeacherWithUser",
    "UserContact",
    "TeacherListing",
    "StatsResponse",
    "parse_payload",
]
