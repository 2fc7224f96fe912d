from datetime import UTC, datetime, timedelta
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from config import ApplicationConfig


def create_access_token(
    user_id: str,
    expires_delta: timedelta = timedelta(hours=1),
    email: Optional[str] = None,
    phone: Optional[str] = None,
    user_metadata: Optional[Dict[str, Any]] = None,
) -> str:
    """
    Create an access token shaped like the identity provider's

    Args:
        user_id: User UUID as string (sub claim)
        expires_delta: Token expiration duration
        email: Optional email claim
        phone: Optional phone claim
        user_metadata: Optional user metadata claim

    Returns:
        JWT token string (HS256)
    """
    now = datetime.now(UTC)
    payload = {
        "sub": user_id,
        "aud": ApplicationConfig.SUPABASE_JWT_AUDIENCE,
        "role": "authenticated",
        "email": email or "",
        "phone": phone or "",
        "user_metadata": user_metadata or {},
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(payload, ApplicationConfig.SUPABASE_JWT_SECRET, algorithm="HS256")


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode an identity provider access token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token,
            ApplicationConfig.SUPABASE_JWT_SECRET,
            algorithms=["HS256"],
            audience=ApplicationConfig.SUPABASE_JWT_AUDIENCE,
        )
    except JWTError:
        return None
    if not payload.get("sub"):
        return None
    return payload
