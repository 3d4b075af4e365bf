import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.auth import jwt_handler
from backend.auth.dependencies import get_current_user
from backend.auth.passwords import hash_password, verify_password
from backend.core.config import Settings, get_settings
from backend.database import get_db
from backend.models.user import User
from backend.schemas.user import AuthResponse, IdentityResponse, LoginRequest, RegisterRequest, UserView

router = APIRouter(tags=['auth'])

logger = logging.getLogger(__name__)


def issue_auth_response(user: User, settings: Settings) -> AuthResponse:
    token = jwt_handler.create_access_token(user.id, user.role, settings)
    return AuthResponse(token=token, user=UserView.from_user(user))


@router.post('/register', response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    data: RegisterRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    if db.query(User.id).filter(User.email == data.email).first():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail='Email already registered.',
        )

    user = User(
        name=data.name,
        email=data.email,
        hashed_password=hash_password(data.password, settings.bcrypt_rounds),
        role='user',
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail='Email already registered.',
        ) from exc
    db.refresh(user)

    logger.info('Registered user %s', user.id)
    return issue_auth_response(user, settings)


@router.post('/login', response_model=AuthResponse)
def login(
    data: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user = db.query(User).filter(User.email == data.email).first()
    if user is None or not verify_password(data.password, user.hashed_password):
        logger.info('Failed login attempt')
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail='Invalid email or password.',
        )

    return issue_auth_response(user, settings)


@router.get('/me', response_model=IdentityResponse)
def me(current_user: User = Depends(get_current_user)):
    return IdentityResponse(id=current_user.id, email=current_user.email, role=current_user.role)
