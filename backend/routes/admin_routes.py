import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from backend.auth.dependencies import get_current_admin, require_admin
from backend.core.config import Settings, get_settings
from backend.database import get_db
from backend.models.dog import Dog
from backend.models.user import User
from backend.routes.profile_routes import apply_profile_update
from backend.schemas.base import ResponseModel
from backend.schemas.dog import AdminDogView, DogStatusFilter, DogView, ModerationResponse
from backend.schemas.user import (
    AdminProfileResponse,
    ProfileUpdateRequest,
    UserRole,
    UserStatus,
    UserStatusUpdateRequest,
    UserView,
)
from backend.services.billing import RevenueProvider, get_revenue_provider

router = APIRouter(tags=['admin'])

logger = logging.getLogger(__name__)

ALL_STATUSES = 'all'


class DashboardStatsResponse(ResponseModel):
    total_users: int
    total_dogs: int
    pending_dogs: int
    revenue: float | None = None


def get_dog_or_404(dog_id: int, db: Session) -> Dog:
    dog = db.query(Dog).filter(Dog.id == dog_id).first()
    if dog is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Dog not found')
    return dog


def set_dog_status(dog_id: int, new_status: str, db: Session) -> Dog:
    dog = get_dog_or_404(dog_id, db)
    dog.status = new_status
    db.commit()
    db.refresh(dog)
    logger.info('Dog profile %s marked %s', dog.id, new_status)
    return dog


@router.get('/profile', response_model=UserView)
def get_admin_profile(current_admin: User = Depends(get_current_admin)):
    logger.info('GET /admin/profile for user %s', current_admin.id)
    return UserView.from_user(current_admin)


@router.put('/profile', response_model=AdminProfileResponse)
def update_admin_profile(
    data: ProfileUpdateRequest,
    current_admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user = apply_profile_update(current_admin, data, db, settings)
    return AdminProfileResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        phone=user.phone,
        role=user.role,
    )


@router.get('/stats', response_model=DashboardStatsResponse, dependencies=[Depends(require_admin)])
def get_dashboard_stats(
    db: Session = Depends(get_db),
    revenue_provider: RevenueProvider = Depends(get_revenue_provider),
):
    total_users = db.query(func.count(User.id)).filter(User.role == 'user').scalar()
    total_dogs = db.query(func.count(Dog.id)).scalar()
    pending_dogs = db.query(func.count(Dog.id)).filter(Dog.status == 'pending').scalar()

    return DashboardStatsResponse(
        total_users=total_users or 0,
        total_dogs=total_dogs or 0,
        pending_dogs=pending_dogs or 0,
        revenue=revenue_provider.total_revenue(),
    )


@router.get('/users', response_model=list[UserView], dependencies=[Depends(require_admin)])
def list_users(
    role: UserRole | None = Query(default=None),
    user_status: UserStatus | None = Query(default=None, alias='status'),
    search: str | None = Query(default=None),
    db: Session = Depends(get_db),
):
    query = db.query(User)
    if role is not None:
        query = query.filter(User.role == role)
    if user_status is not None:
        query = query.filter(User.status == user_status)
    if search and search.strip():
        term = search.strip()
        query = query.filter(
            or_(
                User.name.icontains(term, autoescape=True),
                User.email.icontains(term, autoescape=True),
            )
        )

    return [UserView.from_user(user) for user in query.order_by(User.id.asc()).all()]


@router.put('/users/{user_id}/status', response_model=UserView, dependencies=[Depends(require_admin)])
def update_user_status(
    user_id: int,
    data: UserStatusUpdateRequest,
    db: Session = Depends(get_db),
):
    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='User not found')

    user.status = data.status
    db.commit()
    db.refresh(user)
    logger.info('User %s status set to %s', user.id, user.status)
    return UserView.from_user(user)


@router.get('/dogs', response_model=list[AdminDogView], dependencies=[Depends(require_admin)])
def list_dogs(
    dog_status: DogStatusFilter | None = Query(default=None, alias='status'),
    db: Session = Depends(get_db),
):
    query = db.query(Dog, User).outerjoin(User, Dog.owner_id == User.id)
    if dog_status is not None and dog_status != ALL_STATUSES:
        query = query.filter(Dog.status == dog_status)

    return [AdminDogView.from_row(dog, owner) for dog, owner in query.order_by(Dog.id.asc()).all()]


@router.put('/dogs/{dog_id}/approve', response_model=ModerationResponse, dependencies=[Depends(require_admin)])
def approve_dog(dog_id: int, db: Session = Depends(get_db)):
    dog = set_dog_status(dog_id, 'approved', db)
    return ModerationResponse(message='Dog profile approved', dog=DogView.model_validate(dog))


@router.put('/dogs/{dog_id}/reject', response_model=ModerationResponse, dependencies=[Depends(require_admin)])
def reject_dog(dog_id: int, db: Session = Depends(get_db)):
    dog = set_dog_status(dog_id, 'rejected', db)
    return ModerationResponse(message='Dog profile rejected', dog=DogView.model_validate(dog))
