"""User model definitions."""

from collections.abc import Mapping
from typing import Any

from sqlalchemy import Column, DateTime, Integer, String, func
from sqlalchemy.orm import Session

from portfolio.auth.passwords import hash_password
from portfolio.database import Base
from portfolio.schemas.user import UserCreate

DEFAULT_ROLE = "user"


class User(Base):
    """Represents a site account (admin or ordinary user)."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(String, nullable=False, default=DEFAULT_ROLE)  # admin/user
    created_at = Column(DateTime, server_default=func.now())

    @classmethod
    def create(cls, db: Session, attributes: Mapping[str, Any] | UserCreate) -> "User":
        """Validate, hash and insert one user, committing on success.

        Raises ``pydantic.ValidationError`` before touching the database and
        re-raises ``sqlalchemy.exc.IntegrityError`` (e.g. duplicate email)
        after rolling the session back.
        """
        data = attributes if isinstance(attributes, UserCreate) else UserCreate(**attributes)

        user = cls(
            name=data.name,
            phone=data.phone,
            email=data.email,
            hashed_password=hash_password(data.password),
        )
        if data.role is not None:
            user.role = data.role

        db.add(user)
        try:
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(user)
        return user
