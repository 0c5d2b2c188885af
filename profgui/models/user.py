import uuid

from sqlalchemy import Column, String, Boolean, TIMESTAMP, func
from sqlalchemy.orm import relationship
from profgui.database import Base


def new_id() -> str:
    return str(uuid.uuid4())


# ---------------- USER (AUTH TABLE) ----------------
class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String(255), nullable=True)
    # Phone as typed at registration; lookups go through phone_key.
    phone = Column(String(40), nullable=False)
    # Last 9 digits of the phone, one account per number.
    phone_key = Column(String(9), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False)
    status = Column(String(20), nullable=False, default="pending", index=True)
    must_change_password = Column(Boolean, nullable=False, default=False)
    created_at = Column(TIMESTAMP, server_default=func.now())

    student = relationship("Student", back_populates="user", uselist=False, cascade="all, delete-orphan")
    parent = relationship("Parent", back_populates="user", uselist=False, cascade="all, delete-orphan")
    teacher = relationship("Teacher", back_populates="user", uselist=False, cascade="all, delete-orphan")
