"""
Pydantic schemas for User entity and auth requests.
"""
from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Literal, Optional
from tripboard.schemas.common import CamelModel, RequestModel


class UserResponse(CamelModel):
    """Public view of a user. Never includes the password hash."""
    id: int
    email: str
    name: Optional[str] = None


class AuthRequest(RequestModel):
    """Body of ``POST /auth``."""
    action: Literal["signup", "signin", "signout"]
    email: Optional[str] = None
    password: Optional[str] = Field(default=None, min_length=1)
    name: Optional[str] = None

    @field_validator("email")
    @classmethod
    def check_email_syntax(cls, v):
        """Reject malformed addresses but keep the string exactly as sent."""
        if v is None:
            return v
        try:
            validate_email(v, check_deliverability=False, globally_deliverable=False)
        except EmailNotValidError as e:
            raise ValueError(str(e))
        return v

    @model_validator(mode="after")
    def require_credentials(self):
        """Signup and signin need both email and password."""
        if self.action in ("signup", "signin"):
            if self.email is None or self.password is None:
                raise ValueError(f"email and password are required for {self.action}")
        return self


class AuthResponse(BaseModel):
    """Schema for auth response."""
    user: Optional[UserResponse] = None
    error: Optional[str] = None
