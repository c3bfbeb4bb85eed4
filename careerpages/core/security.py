import logging
import bcrypt
from datetime import datetime, timedelta
from typing import Optional
from jose import jwt, JWTError
from careerpages.core.config import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES

logger = logging.getLogger(__name__)

BCRYPT_MAX_BYTES = 72


def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt with a fresh per-credential salt.
    
    Safety: Truncates passwords >72 bytes before hashing to prevent bcrypt errors.
    Schemas reject such passwords first; this is the last line only.
    
    Args:
        password: Plain text password (max 72 bytes in UTF-8)
        
    Returns:
        Hashed password string
        
    Raises:
        ValueError: If password cannot be hashed
    """
    try:
        password_bytes = password.encode('utf-8')
        if len(password_bytes) > BCRYPT_MAX_BYTES:
            logger.warning("Password exceeds 72 bytes, truncating before hashing (validation should have caught this)")
            password_bytes = password_bytes[:BCRYPT_MAX_BYTES]
        
        return bcrypt.hashpw(password_bytes, bcrypt.gensalt()).decode('utf-8')
    except Exception as e:
        logger.error(f"Password hashing failed: {e}", exc_info=True)
        raise ValueError("Invalid password") from e


def verify_password(password: str, hashed: Optional[str]) -> bool:
    """
    Verify a password against its hash.
    
    Args:
        password: Plain text password
        hashed: Hashed password string
        
    Returns:
        True if password matches hash, False otherwise
    """
    if not hashed:
        return False
    try:
        password_bytes = password.encode('utf-8')[:BCRYPT_MAX_BYTES]
        return bcrypt.checkpw(password_bytes, hashed.encode('utf-8'))
    except (ValueError, TypeError) as e:
        logger.error(f"Password verification failed: {e}", exc_info=True)
        return False


def create_access_token(data: dict, expires_delta: timedelta = None) -> str:
    to_encode = data.copy()
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def create_session_token(user) -> str:
    """Issue the session token carrying the identity claims the editor needs."""
    return create_access_token({
        "sub": user.email,
        "name": user.name,
        "company_slug": user.company.slug,
        "role": user.role,
    })


def decode_access_token(token: str) -> Optional[dict]:
    """Return the token claims, or None when the token is invalid or expired."""
    try:
        return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        return None
