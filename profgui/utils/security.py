import secrets
from datetime import datetime, timedelta, UTC
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from profgui.config import settings


# ==========================
# AUTH CONFIG
# ==========================

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

# No 0/O, 1/I/l: temporary passwords are read aloud or typed from a message.
TEMP_PASSWORD_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZabcdefghjkmnpqrstuvwxyz23456789"
TEMP_PASSWORD_LENGTH = 8


# ==========================
# PASSWORD UTILS
# ==========================

BCRYPT_MAX_BYTES = 72


def _bcrypt_secret(password: str) -> bytes:
    """UTF-8 bytes of the password, cut at the bcrypt input limit.

    Hashing and verification both go through here so a password longer
    than 72 bytes always yields the same secret.
    """
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(_bcrypt_secret(plain_password), hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(_bcrypt_secret(password))


def generate_temporary_password(length: int = TEMP_PASSWORD_LENGTH) -> str:
    return "".join(secrets.choice(TEMP_PASSWORD_ALPHABET) for _ in range(length))


# ==========================
# SESSION TOKEN (JWT)
# ==========================

def utcnow() -> datetime:
    """Naive UTC timestamp, the form the TIMESTAMP columns round-trip."""
    return datetime.now(UTC).replace(tzinfo=None)


def create_session_token(user_id: str, session_id: str, expires_at: datetime) -> str:
    to_encode = {
        "sub": user_id,
        "sid": session_id,
        "exp": expires_at.replace(tzinfo=UTC),
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_session_token(token: str) -> Optional[dict]:
    """Return the claims of a valid, unexpired token, else None."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
    if not payload.get("sub") or not payload.get("sid"):
        return None
    return payload


def session_ttl() -> timedelta:
    return timedelta(hours=settings.SESSION_TTL_HOURS)
