import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.database import get_db
from .schema import TaskSchema, TaskCreate, TaskUpdate
from . import service

logger = logging.getLogger(__name__)

task_router = APIRouter(prefix="/tasks", tags=["Tasks"])

UNKNOWN_EMPLOYEE = "Assigned employee does not exist"

# List all tasks with their assignee's name, newest first
@task_router.get("", response_model=list[TaskSchema])
def list_tasks(db: Session = Depends(get_db)):
    return service.get_tasks(db)

# Get task by id
@task_router.get("/{task_id}", response_model=TaskSchema)
def task_detail(task_id: int, db: Session = Depends(get_db)):
    obj = service.get_task(db, task_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Task not found")
    return obj

# Create task
@task_router.post("", response_model=TaskSchema, status_code=status.HTTP_201_CREATED)
def task_post(payload: TaskCreate, db: Session = Depends(get_db)):
    try:
        return service.create_task(db, payload)
    except IntegrityError:
        # employee_id failed the foreign key
        db.rollback()
        raise HTTPException(status_code=400, detail=UNKNOWN_EMPLOYEE)

# Update task (full replace)
@task_router.put("/{task_id}")
def task_put(task_id: int, payload: TaskUpdate, db: Session = Depends(get_db)):
    try:
        changes = service.update_task(db, task_id, payload)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=400, detail=UNKNOWN_EMPLOYEE)
    if changes == 0:
        raise HTTPException(status_code=404, detail="Task not found")
    return {"message": "Task updated successfully", "changes": changes}

# Delete task
@task_router.delete("/{task_id}")
def task_delete(task_id: int, db: Session = Depends(get_db)):
    if not service.delete_task(db, task_id):
        raise HTTPException(status_code=404, detail="Task not found")
    return {"message": "Task deleted successfully"}
