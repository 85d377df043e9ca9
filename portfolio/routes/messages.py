import logging

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 2000


class ContactMessageRequest(BaseModel):
    name: str
    email: str
    body: str

    @field_validator('name', 'body')
    @classmethod
    def strip_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError('This field is required.')
        return value

    @field_validator('email')
    @classmethod
    def normalize_email(cls, value: str) -> str:
        normalized = value.strip().lower()
        if '@' not in normalized:
            raise ValueError('A valid email address is required.')
        return normalized

    @field_validator('body')
    @classmethod
    def limit_body(cls, value: str) -> str:
        if len(value) > MAX_MESSAGE_LENGTH:
            raise ValueError(f'Messages are limited to {MAX_MESSAGE_LENGTH} characters.')
        return value


def new():
    return {
        'form': 'contact',
        'fields': list(ContactMessageRequest.model_fields),
        'max_body_length': MAX_MESSAGE_LENGTH,
    }


def create(payload: ContactMessageRequest):
    logger.info('Contact message received from %s', payload.email)
    return JSONResponse(status_code=status.HTTP_202_ACCEPTED, content={'status': 'received'})
