import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.auth.dependencies import get_current_user
from backend.auth.passwords import hash_password
from backend.core.config import Settings, get_settings
from backend.database import get_db
from backend.models.user import User
from backend.schemas.user import ProfileUpdateRequest, UserView

router = APIRouter(tags=['profile'])

logger = logging.getLogger(__name__)


def email_taken_by_other(db: Session, email: str, user_id: int) -> bool:
    # Not atomic with the write; the unique index on users.email is the backstop.
    return db.query(User.id).filter(User.email == email, User.id != user_id).first() is not None


def apply_profile_update(user: User, data: ProfileUpdateRequest, db: Session, settings: Settings) -> User:
    changes = data.changes()

    if 'email' in changes and email_taken_by_other(db, changes['email'], user.id):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail='Email already in use.',
        )

    new_password = changes.pop('password', None)
    for field, value in changes.items():
        setattr(user, field, value)
    if new_password is not None:
        logger.info('Updating password for user %s', user.id)
        user.hashed_password = hash_password(new_password, settings.bcrypt_rounds)

    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail='Email already in use.',
        ) from exc
    db.refresh(user)

    logger.info('Profile updated for user %s (fields: %s)', user.id, sorted(data.changes()))
    return user


@router.get('/profile', response_model=UserView)
def get_own_profile(current_user: User = Depends(get_current_user)):
    logger.info('GET /users/profile for user %s', current_user.id)
    return UserView.from_user(current_user)


@router.put('/profile', response_model=UserView)
def update_own_profile(
    data: ProfileUpdateRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user = apply_profile_update(current_user, data, db, settings)
    return UserView.from_user(user)
