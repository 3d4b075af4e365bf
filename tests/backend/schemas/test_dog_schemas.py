import pytest
from pydantic import ValidationError

from backend.schemas.dog import CreateDogRequest


def test_create_dog_request_requires_an_image() -> None:
    with pytest.raises(ValidationError):
        CreateDogRequest(name='Rex', breed='Husky', age=2, gender='Male', images=[])


def test_create_dog_request_rejects_unknown_gender() -> None:
    with pytest.raises(ValidationError):
        CreateDogRequest(name='Rex', breed='Husky', age=2, gender='Unknown', images=['rex.jpg'])


def test_create_dog_request_rejects_status_and_owner_fields() -> None:
    with pytest.raises(ValidationError):
        CreateDogRequest.model_validate(
            {
                'name': 'Rex',
                'breed': 'Husky',
                'age': 2,
                'gender': 'Male',
                'images': ['rex.jpg'],
                'status': 'approved',
            }
        )
    with pytest.raises(ValidationError):
        CreateDogRequest.model_validate(
            {
                'name': 'Rex',
                'breed': 'Husky',
                'age': 2,
                'gender': 'Male',
                'images': ['rex.jpg'],
                'ownerId': 1,
            }
        )
