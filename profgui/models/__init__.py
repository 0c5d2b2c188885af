# profgui/models/__init__.py
# Import models in dependency order
from .user import User
from .profile import Student, Parent, Child, Teacher
from .course_request import CourseRequest
from .auth_session import AuthSession

__all__ = ["User", "Student", "Parent", "Child", "Teacher", "CourseRequest", "AuthSession"]
