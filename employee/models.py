from __future__ import annotations
from typing import TYPE_CHECKING
from datetime import datetime
from enum import Enum
from sqlalchemy import String, DateTime, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func
from core.database import Base

if TYPE_CHECKING:
    from task.models import Task

class EmployeeStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"

class Employee(Base):
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    role: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[EmployeeStatus] = mapped_column(
        SAEnum(EmployeeStatus, name="employee_status", native_enum=False, length=16),
        nullable=False, default=EmployeeStatus.ACTIVE, server_default=EmployeeStatus.ACTIVE.value
    )

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # the store nulls tasks.employee_id itself (ON DELETE SET NULL)
    tasks: Mapped[list["Task"]] = relationship("Task", back_populates="employee", passive_deletes=True)
