"""Visitor inquiry and contact form schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from pvcpro.schemas.quotation import EMAIL_PATTERN


class InquiryIn(BaseModel):
    """Lead-capture modal submission."""

    name: str
    email: str
    phone: Optional[str] = None
    location: Optional[str] = None
    message: Optional[str] = None

    @field_validator("name", "email")
    @classmethod
    def _required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("required")
        return v

    @field_validator("email")
    @classmethod
    def _email(cls, v: str) -> str:
        if not EMAIL_PATTERN.search(v):
            raise ValueError("invalid email")
        return v

    @field_validator("phone", "location", "message")
    @classmethod
    def _blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None


class UserInquiry(BaseModel):
    id: str
    name: str
    email: str
    phone: Optional[str] = None
    location: Optional[str] = None
    message: Optional[str] = None
    created_at: Optional[datetime] = None


class ContactMessage(BaseModel):
    """Contact page form. Validated field by field so each error can be shown."""

    name: str = ""
    email: str = ""
    phone: str = ""
    company: str = ""
    subject: str = ""
    message: str = ""

    def errors(self) -> dict[str, str]:
        errors: dict[str, str] = {}
        if not self.name.strip():
            errors["name"] = "Name is required"
        if not self.email.strip():
            errors["email"] = "Email is required"
        elif not EMAIL_PATTERN.search(self.email):
            errors["email"] = "Email is invalid"
        if not self.subject.strip():
            errors["subject"] = "Subject is required"
        if not self.message.strip():
            errors["message"] = "Message is required"
        return errors
