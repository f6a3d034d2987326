import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.database import get_db
from .schema import EmployeeSchema, EmployeeCreate, EmployeeUpdate
from . import service

logger = logging.getLogger(__name__)

employee_router = APIRouter(prefix="/employees", tags=["Employees"])

# List all employees, newest first
@employee_router.get("", response_model=list[EmployeeSchema])
def list_employees(db: Session = Depends(get_db)):
    return service.get_employees(db)

# Get employee by id
@employee_router.get("/{employee_id}", response_model=EmployeeSchema)
def employee_detail(employee_id: int, db: Session = Depends(get_db)):
    obj = service.get_employee(db, employee_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Employee not found")
    return obj

# Create employee
@employee_router.post("", response_model=EmployeeSchema, status_code=status.HTTP_201_CREATED)
def employee_post(payload: EmployeeCreate, db: Session = Depends(get_db)):
    try:
        return service.create_employee(db, payload)
    except IntegrityError:
        db.rollback()
        logger.info("Duplicate email rejected: %s", payload.email)
        raise HTTPException(status_code=400, detail="Email already exists")

# Update employee (full replace)
@employee_router.put("/{employee_id}", response_model=EmployeeSchema)
def employee_put(employee_id: int, payload: EmployeeUpdate, db: Session = Depends(get_db)):
    obj = service.get_employee(db, employee_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Employee not found")
    try:
        return service.update_employee(db, employee_id, payload)
    except IntegrityError:
        db.rollback()
        logger.info("Duplicate email rejected: %s", payload.email)
        raise HTTPException(status_code=400, detail="Email already exists")

# Delete employee, unassigning their tasks
@employee_router.delete("/{employee_id}")
def employee_delete(employee_id: int, db: Session = Depends(get_db)):
    unassigned = service.delete_employee(db, employee_id)
    if unassigned is None:
        raise HTTPException(status_code=404, detail="Employee not found")
    return {"message": "Employee deleted successfully", "tasksUnassigned": unassigned}
