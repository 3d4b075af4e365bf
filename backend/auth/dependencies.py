from collections.abc import Iterable

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from backend.auth import jwt_handler
from backend.auth.jwt_handler import TokenClaims
from backend.core.config import Settings, get_settings
from backend.database import get_db
from backend.models.user import User

security = HTTPBearer(auto_error=False)


def authorize(role: str, allowed_roles: Iterable[str]) -> bool:
    return role in set(allowed_roles)


def get_token_claims(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    settings: Settings = Depends(get_settings),
) -> TokenClaims:
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return jwt_handler.decode_access_token(credentials.credentials, settings)
    except jwt.InvalidTokenError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc


def require_roles(*allowed_roles: str):
    def dependency(claims: TokenClaims = Depends(get_token_claims)) -> TokenClaims:
        if not authorize(claims.role, allowed_roles):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Not authorized for this resource",
            )
        return claims

    return dependency


require_admin = require_roles("admin")


def load_user(claims: TokenClaims, db: Session) -> User:
    user = db.query(User).filter(User.id == claims.user_id).first()
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


def get_current_user(
    claims: TokenClaims = Depends(get_token_claims),
    db: Session = Depends(get_db),
) -> User:
    return load_user(claims, db)


def get_current_admin(
    claims: TokenClaims = Depends(require_admin),
    db: Session = Depends(get_db),
) -> User:
    return load_user(claims, db)
