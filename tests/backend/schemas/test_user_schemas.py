import pytest
from pydantic import ValidationError

from backend.schemas.user import LoginRequest, ProfileUpdateRequest, RegisterRequest


def test_register_request_strips_email_and_keeps_local_part_case() -> None:
    request = RegisterRequest(name=' Sarah ', email=' Sarah@PawMate.com ', password='secret1')

    assert request.name == 'Sarah'
    assert request.email == 'Sarah@pawmate.com'


@pytest.mark.parametrize(
    ('payload', 'message'),
    [
        ({'name': '', 'email': 'a@x.com', 'password': 'secret1'}, 'Name is required.'),
        ({'name': 'A', 'email': 'not-an-email', 'password': 'secret1'}, 'value is not a valid email address'),
        ({'name': 'A', 'email': 'a@x.com', 'password': '123'}, 'Password must be at least 6 characters.'),
        ({'name': 'A', 'email': 'a@x.com', 'password': 'x' * 73}, 'Password must be 72 bytes or fewer.'),
    ],
)
def test_register_request_rejects_invalid_input(payload: dict, message: str) -> None:
    with pytest.raises(ValidationError) as exception_info:
        RegisterRequest(**payload)

    assert message in str(exception_info.value)


def test_register_request_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        RegisterRequest(name='A', email='a@x.com', password='secret1', role='admin')


def test_profile_update_changes_only_include_supplied_fields() -> None:
    request = ProfileUpdateRequest.model_validate({'phone': '0712345678'})

    assert request.changes() == {'phone': '0712345678'}


def test_profile_update_ignores_null_fields() -> None:
    request = ProfileUpdateRequest.model_validate({'name': None, 'email': 'new@x.com'})

    assert request.changes() == {'email': 'new@x.com'}


def test_profile_update_accepts_camel_case_confirmation() -> None:
    request = ProfileUpdateRequest.model_validate({'password': 'newpw12', 'confirmPassword': 'newpw12'})

    assert request.changes() == {'password': 'newpw12'}


def test_profile_update_rejects_password_mismatch() -> None:
    with pytest.raises(ValidationError) as exception_info:
        ProfileUpdateRequest.model_validate({'password': 'newpw12', 'confirmPassword': 'other12'})

    assert 'Passwords do not match.' in str(exception_info.value)


def test_register_request_reports_blank_email_as_required() -> None:
    with pytest.raises(ValidationError) as exception_info:
        RegisterRequest(name='A', email='   ', password='secret1')

    assert 'Email is required.' in str(exception_info.value)


@pytest.mark.parametrize('email', ['a@b..c', 'a@-.-', '<x>@y.z'])
def test_login_request_rejects_malformed_email(email: str) -> None:
    with pytest.raises(ValidationError):
        LoginRequest(email=email, password='secret1')


def test_profile_update_validates_and_strips_email() -> None:
    request = ProfileUpdateRequest.model_validate({'email': ' new@x.com '})

    assert request.changes() == {'email': 'new@x.com'}
    with pytest.raises(ValidationError):
        ProfileUpdateRequest.model_validate({'email': 'new@x..com'})
