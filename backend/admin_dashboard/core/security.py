# admin_dashboard/core/security.py
"""
Security module for authentication.
Handles password hashing and signing/verifying the session token that carries
the user's identity and role claims.
"""
import datetime as dt

import jwt  # PyJWT
from passlib.context import CryptContext

from admin_dashboard.config import settings

# Password hashing context
# Argon2 salts every hash, so hashing the same password twice gives different strings
pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
)

# JWT configuration
JWT_SECRET = settings.jwt_secret
ACCESS_TOKEN_EXPIRE_MINUTES = settings.access_token_expire_minutes
JWT_ALG = "HS256"  # HMAC SHA-256

# Name of the HttpOnly cookie holding the session token
ACCESS_TOKEN_COOKIE = "accessToken"


def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    Note: Never store plain text passwords. Always use this function before saving.
    """
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a stored hash.

    Returns False (instead of raising) when the stored value is not a hash
    passlib recognises.
    """
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        return False


def create_access_token(user_id: str, name: str, email: str, role: str) -> str:
    """
    Create a signed session token.

    The token embeds the whole claims bundle so the authorization gate can
    decide on a request without a database query.

    Token payload includes:
        - sub: Subject (user ID)
        - name, email: identity shown by the dashboard
        - role: "admin" or "member"
        - iat / exp: issue and expiry timestamps
    """
    now = dt.datetime.now(dt.timezone.utc)
    payload = {
        "sub": user_id,
        "name": name,
        "email": email,
        "role": role,
        "iat": now,
        "exp": now + dt.timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES),
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALG)


def decode_access_token(token: str) -> dict:
    """
    Decode and validate a session token.

    Raises:
        jwt.ExpiredSignatureError: If token has expired
        jwt.InvalidTokenError: If token is invalid or malformed
    """
    return jwt.decode(
        token,
        JWT_SECRET,
        algorithms=[JWT_ALG],
        options={"require": ["sub", "role", "exp"]},
    )
