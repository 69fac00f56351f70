from datetime import datetime, timedelta
from typing import Optional
from jose import JWTError, jwt

from fastapi import Request

import bcrypt
import logging
import os

logger = logging.getLogger("gym_admin")

# The dashboard has a single locally configured admin login. There is no
# user table and no refresh; the cookie simply expires.
SECRET_KEY = os.getenv("SECRET_KEY", "dev_secret_key_123")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 8))
COOKIE_NAME = "access_token"

ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_NAME = os.getenv("ADMIN_NAME", "Gym Admin")
_ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")


def get_password_hash(password):
    # bcrypt requires bytes, returns bytes. We store as string.
    pwd_bytes = password.encode('utf-8')
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(pwd_bytes, salt)
    return hashed.decode('utf-8')

def verify_password(plain_password, hashed_password):
    # bcrypt requires bytes for both
    pwd_bytes = plain_password.encode('utf-8')
    hashed_bytes = hashed_password.encode('utf-8')
    return bcrypt.checkpw(pwd_bytes, hashed_bytes)

ADMIN_PASSWORD_HASH = get_password_hash(_ADMIN_PASSWORD)


def authenticate(username: Optional[str], password: Optional[str]) -> Optional[dict]:
    """Check the submitted credentials against the configured admin."""
    if not username or not password:
        return None
    if username != ADMIN_USERNAME or not verify_password(password, ADMIN_PASSWORD_HASH):
        logger.info(f"AUTH: Rejected login for {username!r}")
        return None
    return {"username": ADMIN_USERNAME, "name": ADMIN_NAME}

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)
    return encoded_jwt

def get_current_admin(request: Request) -> Optional[dict]:
    """The signed-in admin from the cookie, or None. Pages redirect to /login on None."""
    token = request.cookies.get(COOKIE_NAME)
    if not token:
        return None

    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError as e:
        logger.info(f"AUTH: Invalid token: {e}")
        return None

    username = payload.get("sub")
    if username != ADMIN_USERNAME:
        return None
    return {"username": username, "name": payload.get("name", ADMIN_NAME)}
