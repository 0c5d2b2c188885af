from sqlalchemy import Column, String, TIMESTAMP, func
from profgui.database import Base


class AuthSession(Base):
    """Server-side record of a login session.

    user_id is not a foreign key; removing an account revokes its
    sessions explicitly.
    """

    __tablename__ = "auth_sessions"

    id = Column(String(64), primary_key=True)
    user_id = Column(String(36), index=True, nullable=False)
    created_at = Column(TIMESTAMP, server_default=func.now())
    expires_at = Column(TIMESTAMP, nullable=False)
