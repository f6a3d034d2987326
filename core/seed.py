from __future__ import annotations

import logging

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from employee.models import Employee, EmployeeStatus
from task.models import Task, TaskStatus, TaskPriority

logger = logging.getLogger(__name__)

SAMPLE_EMPLOYEES = [
    ("John Doe", "john.doe@company.com", "Software Engineer", EmployeeStatus.ACTIVE),
    ("Jane Smith", "jane.smith@company.com", "Product Manager", EmployeeStatus.ACTIVE),
    ("Mike Johnson", "mike.johnson@company.com", "Designer", EmployeeStatus.INACTIVE),
]

# (title, description, status, priority, due date, assignee email)
SAMPLE_TASKS = [
    ("Implement user authentication", "Add login and signup functionality",
     TaskStatus.IN_PROGRESS, TaskPriority.HIGH, "2024-02-15", "john.doe@company.com"),
    ("Design dashboard UI", "Create modern dashboard design",
     TaskStatus.TODO, TaskPriority.MEDIUM, "2024-02-20", "mike.johnson@company.com"),
    ("API documentation", "Document all backend endpoints",
     TaskStatus.DONE, TaskPriority.LOW, "2024-02-10", "jane.smith@company.com"),
]


def _count(db: Session, model) -> int:
    return db.scalar(select(func.count()).select_from(model)) or 0


def seed_sample_data(db: Session) -> int:
    """Insert the sample employees and tasks into whichever table is empty. Returns rows inserted."""
    inserted = 0

    if _count(db, Employee) == 0:
        db.add_all(
            Employee(name=name, email=email, role=role, status=status)
            for name, email, role, status in SAMPLE_EMPLOYEES
        )
        db.flush()
        inserted += len(SAMPLE_EMPLOYEES)
        logger.info("Inserted %d sample employees", len(SAMPLE_EMPLOYEES))

    if _count(db, Task) == 0:
        ids_by_email = dict(db.execute(select(Employee.email, Employee.id)).all())
        db.add_all(
            Task(
                title=title,
                description=description,
                status=status,
                priority=priority,
                due_date=due_date,
                employee_id=ids_by_email.get(email),
            )
            for title, description, status, priority, due_date, email in SAMPLE_TASKS
        )
        inserted += len(SAMPLE_TASKS)
        logger.info("Inserted %d sample tasks", len(SAMPLE_TASKS))

    db.commit()
    return inserted
