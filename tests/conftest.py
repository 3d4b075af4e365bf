import os

os.environ.setdefault('DATABASE_URL', 'sqlite://')

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from backend.auth.jwt_handler import create_access_token  # noqa: E402
from backend.auth.passwords import hash_password  # noqa: E402
from backend.core.config import Settings, get_settings  # noqa: E402
from backend.database import Base, get_db  # noqa: E402
from backend.main import create_app  # noqa: E402
from backend.models.dog import Dog  # noqa: E402
from backend.models.user import User  # noqa: E402


@pytest.fixture
def settings() -> Settings:
    return Settings(
        app_env='test',
        database_url='sqlite://',
        database_url_defaulted=False,
        jwt_secret_key='test-secret-key',
        bcrypt_rounds=4,
    )


@pytest.fixture
def db_engine():
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine, tables=[User.__table__, Dog.__table__])
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine, tables=[Dog.__table__, User.__table__])
        engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def app(settings: Settings, session_factory):
    application = create_app(settings)

    def override_get_db():
        db = session_factory()
        try:
            yield db
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    application.dependency_overrides[get_db] = override_get_db
    application.dependency_overrides[get_settings] = lambda: settings
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def make_user(db_session, settings: Settings):
    def _make_user(
        email: str = 'owner@example.com',
        password: str = 'secret1',
        role: str = 'user',
        name: str = 'Test User',
        **fields,
    ) -> User:
        user = User(
            name=name,
            email=email,
            hashed_password=hash_password(password, settings.bcrypt_rounds),
            role=role,
            **fields,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_dog(db_session):
    def _make_dog(owner_id: int, status: str = 'pending', name: str = 'Buster', **fields) -> Dog:
        dog = Dog(
            owner_id=owner_id,
            name=name,
            breed=fields.pop('breed', 'Golden Retriever'),
            age=fields.pop('age', 3),
            gender=fields.pop('gender', 'Male'),
            images=fields.pop('images', ['https://images.example.com/buster.jpg']),
            status=status,
            **fields,
        )
        db_session.add(dog)
        db_session.commit()
        db_session.refresh(dog)
        return dog

    return _make_dog


@pytest.fixture
def auth_headers(settings: Settings):
    def _auth_headers(user: User) -> dict[str, str]:
        token = create_access_token(user.id, user.role, settings)
        return {'Authorization': f'Bearer {token}'}

    return _auth_headers


@pytest.fixture
def admin_user(make_user) -> User:
    return make_user(email='admin@pawmate.com', password='admin123', role='admin', name='Demo Admin')


@pytest.fixture
def regular_user(make_user) -> User:
    return make_user(email='user@pawmate.com', password='user123', role='user', name='Demo User')
