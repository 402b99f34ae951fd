"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Field names are snake_case in Python and camelCase on the wire, which is
what the front end reads (firstName, departmentId, resumePath, ...).
"""

import re
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from satrecruit.db.models import valid_id

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ============================================================
# DEPARTMENT SCHEMAS
# ============================================================

class DepartmentResponse(CamelModel):
    id: int
    name: str
    description: str
    icon: str
    color: str
    requirements: List[str] = []
    responsibilities: List[str] = []


# ============================================================
# APPLICANT SCHEMAS
# ============================================================

def _required_text(value: Optional[str], label: str) -> str:
    if value is None or not str(value).strip():
        raise PydanticCustomError("required", "{label} is required", {"label": label})
    return str(value).strip()


def parse_department_id(value) -> int:
    """Parse a departmentId form value into an id that can exist in the store."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise PydanticCustomError("required", "Please select a department")
    if isinstance(value, bool):
        raise PydanticCustomError("int", "Department must be a number")
    try:
        department_id = int(str(value).strip())
    except ValueError:
        raise PydanticCustomError("int", "Department must be a number")
    if not valid_id(department_id):
        raise PydanticCustomError("int", "Department must be a number")
    return department_id


class ApplicantForm(CamelModel):
    """
    Raw multipart form fields of an application. Every field arrives as an
    optional string; the validators report all problems in one pass.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
    )

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    department_id: Optional[int] = None
    experience: Optional[str] = None
    skills: Optional[str] = None
    cover_letter: Optional[str] = None

    @field_validator("first_name", mode="before")
    @classmethod
    def check_first_name(cls, v):
        return _required_text(v, "First name")

    @field_validator("last_name", mode="before")
    @classmethod
    def check_last_name(cls, v):
        return _required_text(v, "Last name")

    @field_validator("experience", mode="before")
    @classmethod
    def check_experience(cls, v):
        return _required_text(v, "Experience")

    @field_validator("skills", mode="before")
    @classmethod
    def check_skills(cls, v):
        return _required_text(v, "Skills")

    @field_validator("email", mode="before")
    @classmethod
    def check_email(cls, v):
        email = _required_text(v, "Email")
        if not EMAIL_PATTERN.match(email):
            raise PydanticCustomError("email", "Please enter a valid email address")
        return email

    @field_validator("department_id", mode="before")
    @classmethod
    def check_department_id(cls, v):
        return parse_department_id(v)

    @field_validator("phone", "cover_letter", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if v is None:
            return None
        v = str(v).strip()
        return v or None


class ApplicantResponse(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    department_id: int
    experience: str
    skills: str
    cover_letter: Optional[str] = None
    resume_path: Optional[str] = None
    created_at: datetime


# ============================================================
# ABOUT US SCHEMAS
# ============================================================

class AboutUsUpdate(BaseModel):
    content: StrictStr = Field(..., min_length=1)


class AboutUsResponse(CamelModel):
    id: Optional[int] = None
    content: str = ""
    updated_at: Optional[datetime] = None


# ============================================================
# AUTH SCHEMAS
# ============================================================

class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


class AdminResponse(BaseModel):
    username: Optional[str] = None
    role: str = "admin"


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str
    success: bool = True


class ErrorResponse(BaseModel):
    detail: str
    errors: Optional[Dict[str, str]] = None
