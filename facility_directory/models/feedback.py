"""Pydantic models for the feedback form."""
from pydantic import BaseModel, EmailStr, Field, model_validator
from typing import Optional

from facility_directory.services.anonymous_toggle import IdentityFields

_TRUTHY = {"true", "1", "on", "yes", "y", "t"}


def _is_checked(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


class FeedbackForm(BaseModel):
    anonymous: bool = False
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[EmailStr] = None
    message: str = Field(..., min_length=1, max_length=2000)
    facility_id: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def drop_email_when_anonymous(cls, data):
        # An anonymous entry never keeps an e-mail, so it is not validated either
        if isinstance(data, dict) and _is_checked(data.get("anonymous")):
            data = {**data, "email": None}
        return data

    @model_validator(mode="after")
    def apply_anonymous_toggle(self):
        # Same rule as the page checkbox: anonymous clears both name fields
        fields = IdentityFields(self.first_name or "", self.last_name or "")
        fields.set_anonymous(self.anonymous)
        self.first_name = fields.first_name or None
        self.last_name = fields.last_name or None
        if not self.message.strip():
            raise ValueError("message must not be blank")
        return self


class FeedbackCreated(BaseModel):
    id: str
    anonymous: bool
