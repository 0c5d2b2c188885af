from typing import ClassVar, Dict, Optional

from pydantic import BaseModel, Field

# ======================
# LOGIN / LOGOUT
# ======================

class LoginRequest(BaseModel):
    phone: str = Field(..., min_length=9)
    password: str = Field(..., min_length=1)

    # Login only checks presence; length rules belong to registration.
    field_messages: ClassVar[Dict[str, str]] = {"password": "Mot de passe requis"}


class LoginUser(BaseModel):
    id: str
    role: str
    must_change_password: bool


class LoginResponse(BaseModel):
    message: str
    user: LoginUser


# ======================
# PASSWORD UPDATE
# ======================

class ChangePasswordRequest(BaseModel):
    new_password: str = Field(..., min_length=6)


# ======================
# ADMIN REVIEW
# ======================

class StatusUpdateResponse(BaseModel):
    message: str
    # Only set on approval; delivered to the user by the admin out of band.
    temp_password: Optional[str] = None
    user_email: Optional[str] = None
    user_phone: Optional[str] = None


class MessageResponse(BaseModel):
    message: str
