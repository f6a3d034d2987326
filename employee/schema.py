from datetime import datetime
from typing import Optional
from pydantic import ConfigDict, field_validator, model_validator

from core.schemas import ApiModel, as_utc, is_blank
from .models import EmployeeStatus

STATUS_CHOICES = ", ".join(s.value for s in EmployeeStatus)


def _check_status(value):
    if isinstance(value, EmployeeStatus):
        return value
    if value not in {s.value for s in EmployeeStatus}:
        raise ValueError(f"Invalid status. Must be one of: {STATUS_CHOICES}")
    return value


class EmployeeSchema(ApiModel):
    id: int
    name: str
    email: str
    role: str
    status: EmployeeStatus
    created_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)

    @field_validator("created_at")
    @classmethod
    def created_at_utc(cls, v):
        return as_utc(v)


# PUBLIC payload, what clients send on POST
class EmployeeCreate(ApiModel):
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    status: EmployeeStatus = EmployeeStatus.ACTIVE

    @field_validator("status", mode="before")
    @classmethod
    def known_status(cls, v):
        if is_blank(v):
            return EmployeeStatus.ACTIVE
        return _check_status(v)

    @model_validator(mode="after")
    def required_fields(self):
        if is_blank(self.name) or is_blank(self.email) or is_blank(self.role):
            raise ValueError("name, email, and role are required fields")
        return self


# Full replace: every field must be resupplied
class EmployeeUpdate(ApiModel):
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    status: Optional[EmployeeStatus] = None

    @field_validator("status", mode="before")
    @classmethod
    def known_status(cls, v):
        if is_blank(v):
            return None
        return _check_status(v)

    @model_validator(mode="after")
    def required_fields(self):
        if any(is_blank(v) for v in (self.name, self.email, self.role, self.status)):
            raise ValueError("name, email, role, and status are required")
        return self
