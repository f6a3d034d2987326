import logging
from typing import Optional, List
from sqlalchemy.orm import Session
from sqlalchemy import select, update, delete
from .models import Task
from .schema import TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)

def get_tasks(db: Session) -> List[Task]:
    statement = select(Task).order_by(Task.created_at.desc(), Task.id.desc())
    rows = list(db.scalars(statement))
    logger.debug("Fetched %d tasks", len(rows))
    return rows

def get_task(db: Session, task_id: int) -> Optional[Task]:
    return db.get(Task, task_id)

def create_task(db: Session, task: TaskCreate) -> Task:
    db_task = Task(
        title=task.title,
        description=task.description,
        status=task.status,
        priority=task.priority,
        due_date=task.due_date,
        employee_id=task.employee_id,
    )
    db.add(db_task)
    db.commit()
    db.refresh(db_task)
    logger.info("Task created: id=%s employee_id=%s", db_task.id, db_task.employee_id)
    return db_task

def update_task(db: Session, task_id: int, payload: TaskUpdate) -> int:
    """Full replace of every mutable column. Returns the number of rows changed (0 or 1)."""
    statement = (
        update(Task)
        .where(Task.id == task_id)
        .values(
            title=payload.title,
            description=payload.description,
            status=payload.status,
            priority=payload.priority,
            due_date=payload.due_date,
            employee_id=payload.employee_id,
        )
    )
    changes = db.execute(statement).rowcount
    db.commit()
    if changes:
        logger.info("Task updated: id=%s", task_id)
    return changes

def delete_task(db: Session, task_id: int) -> bool:
    changes = db.execute(delete(Task).where(Task.id == task_id)).rowcount
    db.commit()
    if changes:
        logger.info("Task deleted: id=%s", task_id)
    return changes > 0
