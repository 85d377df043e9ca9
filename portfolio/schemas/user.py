from typing import Literal

from pydantic import BaseModel, field_validator, model_validator

Role = Literal["admin", "user"]


class UserCreate(BaseModel):
    """Input accepted by ``User.create``; ``password_confirmation`` is checked, never stored."""

    name: str
    phone: str
    email: str
    password: str
    password_confirmation: str
    role: Role | None = None

    @field_validator("name")
    @classmethod
    def name_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name is required")
        return value

    @field_validator("phone")
    @classmethod
    def phone_digits(cls, value: str) -> str:
        value = value.strip()
        if not value.isdigit():
            raise ValueError("phone must contain only digits")
        return value

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        normalized = value.strip().lower()
        local, _, domain = normalized.partition("@")
        if not local or "." not in domain:
            raise ValueError("email is invalid")
        return normalized

    @field_validator("password")
    @classmethod
    def password_min(cls, value: str) -> str:
        if len(value) < 6:
            raise ValueError("password must be at least 6 characters")
        return value

    @field_validator("role", mode="before")
    @classmethod
    def role_normalize(cls, value):
        if value is None:
            return None
        return str(value).strip().lower()

    @model_validator(mode="after")
    def passwords_match(self) -> "UserCreate":
        if self.password != self.password_confirmation:
            raise ValueError("password confirmation does not match password")
        return self
