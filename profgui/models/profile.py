from sqlalchemy import Column, String, Text, ForeignKey, JSON
from sqlalchemy.orm import relationship
from profgui.database import Base
from profgui.models.user import new_id


# ---------------- STUDENT ----------------
class Student(Base):
    __tablename__ = "students"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id"), unique=True, nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    city = Column(String(100), nullable=False)
    level = Column(String(100), nullable=False)
    subjects = Column(JSON, nullable=False, default=list)
    course_type = Column(String(20), nullable=False)

    user = relationship("User", back_populates="student")


# ---------------- PARENT ----------------
class Parent(Base):
    __tablename__ = "parents"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id"), unique=True, nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    address = Column(String(255), nullable=False)

    user = relationship("User", back_populates="parent")
    children = relationship(
        "Child",
        back_populates="parent",
        cascade="all, delete-orphan",
        order_by="Child.id",
    )


class Child(Base):
    __tablename__ = "children"

    id = Column(String(36), primary_key=True, default=new_id)
    parent_id = Column(String(36), ForeignKey("parents.id", ondelete="CASCADE"), index=True, nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    level = Column(String(100), nullable=False)
    subjects = Column(JSON, nullable=False, default=list)

    parent = relationship("Parent", back_populates="children")


# ---------------- TEACHER ----------------
class Teacher(Base):
    __tablename__ = "teachers"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id"), unique=True, nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    city = Column(String(100), nullable=False)
    subjects = Column(JSON, nullable=False, default=list)
    levels = Column(JSON, nullable=False, default=list)
    diploma = Column(String(255), nullable=False)
    experience = Column(Text)
    availability = Column(String(255), nullable=False)
    course_type = Column(String(20), nullable=False)
    bio = Column(Text)

    user = relationship("User", back_populates="teacher")
