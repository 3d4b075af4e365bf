import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from backend.auth.dependencies import get_current_user
from backend.database import get_db
from backend.models.dog import Dog
from backend.models.user import User
from backend.schemas.dog import CreateDogRequest, DogView

router = APIRouter(tags=['dogs'])

logger = logging.getLogger(__name__)


@router.post('', response_model=DogView, status_code=status.HTTP_201_CREATED)
def create_dog_profile(
    data: CreateDogRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    dog = Dog(
        owner_id=current_user.id,
        name=data.name,
        breed=data.breed,
        age=data.age,
        gender=data.gender,
        images=list(data.images),
        status='pending',
    )
    db.add(dog)
    db.commit()
    db.refresh(dog)

    logger.info('Dog profile %s created by user %s', dog.id, current_user.id)
    return dog


@router.get('/mine', response_model=list[DogView])
def list_my_dogs(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return db.query(Dog).filter(Dog.owner_id == current_user.id).order_by(Dog.id.asc()).all()


@router.get('', response_model=list[DogView], dependencies=[Depends(get_current_user)])
def list_approved_dogs(db: Session = Depends(get_db)):
    return db.query(Dog).filter(Dog.status == 'approved').order_by(Dog.id.asc()).all()
