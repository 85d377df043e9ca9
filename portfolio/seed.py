"""Create the site's bootstrap accounts.

Usage:
    python -m portfolio.seed
"""
import enum
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy.orm import Session

from portfolio.core import config
from portfolio.database import SessionLocal, init_db
from portfolio.models.user import User
from portfolio.schemas.user import UserCreate

logger = logging.getLogger(__name__)


class OnConflict(str, enum.Enum):
    FAIL = "fail"
    SKIP = "skip"


SeedUser = tuple[Mapping[str, Any], str | None]

DEFAULT_SEED_USERS: tuple[SeedUser, ...] = (
    (
        {
            "name": "Sebastian Valdez",
            "phone": "4152994331",
            "email": "seb@test.com",
            "password": "asdfasdf",
            "password_confirmation": "asdfasdf",
        },
        "admin",
    ),
    (
        {
            "name": "Joe Shmoe",
            "phone": "5552224343",
            "email": "user@test.com",
            "password": "asdfasdf",
            "password_confirmation": "asdfasdf",
        },
        None,
    ),
)

CREATED_MESSAGES = {
    "admin": "admin created!",
    "user": "user created",
}


def _email_taken(db: Session, email: str) -> bool:
    return db.query(User.id).filter(User.email == email).first() is not None


def seed_users(
    db: Session,
    users: Iterable[SeedUser],
    on_conflict: OnConflict = OnConflict.FAIL,
) -> list[User]:
    on_conflict = OnConflict(on_conflict)
    created = []

    for attributes, role in users:
        attributes = dict(attributes)
        if role is not None:
            attributes["role"] = role
        data = UserCreate(**attributes)

        if on_conflict is OnConflict.SKIP and _email_taken(db, data.email):
            logger.info("User %s already exists; skipping", data.email)
            continue

        user = User.create(db, data)
        created.append(user)
        print(CREATED_MESSAGES.get(user.role, CREATED_MESSAGES["user"]))

    return created


def run(
    db: Session | None = None,
    users: Iterable[SeedUser] = DEFAULT_SEED_USERS,
    on_conflict: OnConflict | str | None = None,
) -> list[User]:
    policy = OnConflict(on_conflict or config.SEED_ON_CONFLICT)

    if db is not None:
        return seed_users(db, users, policy)

    db = SessionLocal()
    try:
        return seed_users(db, users, policy)
    finally:
        db.close()


def main() -> None:
    config.configure_logging()
    init_db()
    run()


if __name__ == "__main__":
    main()
