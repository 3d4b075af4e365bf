from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import jwt

from backend.core.config import Settings


@dataclass(frozen=True)
class TokenClaims:
    user_id: int
    role: str


def create_access_token(
    user_id: int,
    role: str,
    settings: Settings,
    expires_minutes: int | None = None,
) -> str:
    expire_minutes = expires_minutes or settings.jwt_expires_minutes
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "role": role,
        "iat": now,
        "exp": now + timedelta(minutes=expire_minutes),
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> TokenClaims:
    payload = jwt.decode(
        token,
        settings.jwt_secret_key,
        algorithms=[settings.jwt_algorithm],
        options={"require": ["sub", "exp"]},
    )

    subject = payload.get("sub")
    role = payload.get("role")
    if not role or not isinstance(role, str):
        raise jwt.InvalidTokenError("Token is missing the role claim")
    try:
        user_id = int(subject)
    except (TypeError, ValueError) as exc:
        raise jwt.InvalidTokenError("Token subject is not a user id") from exc

    return TokenClaims(user_id=user_id, role=role)
