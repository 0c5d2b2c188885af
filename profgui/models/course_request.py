from sqlalchemy import Column, String, Text, TIMESTAMP, func
from profgui.database import Base
from profgui.models.user import new_id


# Reserved for matching students with teachers; no route reads or writes it yet.
class CourseRequest(Base):
    __tablename__ = "course_requests"

    id = Column(String(36), primary_key=True, default=new_id)
    student_id = Column(String(36))
    child_id = Column(String(36))
    parent_id = Column(String(36))
    teacher_id = Column(String(36))
    subject = Column(String(100), nullable=False)
    message = Column(Text)
    status = Column(String(20), nullable=False, default="pending")
    created_at = Column(TIMESTAMP, server_default=func.now())
