"""Recreate the demo admin and user accounts.

Usage:
    python -m backend.seed
"""
import logging
import sys

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.auth.passwords import hash_password
from backend.core.config import get_settings
from backend.database import SessionLocal, create_schema, engine
from backend.models.dog import Dog
from backend.models.user import User

logger = logging.getLogger(__name__)

DEMO_ACCOUNTS = (
    {
        "name": "Demo Admin",
        "email": "admin@pawmate.com",
        "password": "admin123",
        "role": "admin",
        "phone": "0712345678",
    },
    {
        "name": "Demo User",
        "email": "user@pawmate.com",
        "password": "user123",
        "role": "user",
        "phone": "0712345679",
    },
)


def seed_demo_accounts(db: Session, bcrypt_rounds: int) -> list[User]:
    emails = [account["email"] for account in DEMO_ACCOUNTS]
    demo_user_ids = select(User.id).where(User.email.in_(emails))
    db.query(Dog).filter(Dog.owner_id.in_(demo_user_ids)).delete(synchronize_session=False)
    db.query(User).filter(User.email.in_(emails)).delete(synchronize_session=False)

    users = [
        User(
            name=account["name"],
            email=account["email"],
            hashed_password=hash_password(account["password"], bcrypt_rounds),
            role=account["role"],
            phone=account["phone"],
            status="active",
        )
        for account in DEMO_ACCOUNTS
    ]
    db.add_all(users)
    db.commit()
    return users


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    settings = get_settings()

    db = SessionLocal()
    try:
        create_schema(engine)
        seed_demo_accounts(db, settings.bcrypt_rounds)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Seeding failed")
        sys.exit(1)
    finally:
        db.close()

    logger.info("Seeding successful!")
    for account in DEMO_ACCOUNTS:
        logger.info("%s account: %s", account["role"].title(), account["email"])


if __name__ == "__main__":
    main()
