import logging
from typing import Optional, List
from sqlalchemy.orm import Session
from sqlalchemy import select, update, delete
from .models import Employee
from .schema import EmployeeCreate, EmployeeUpdate
from task.models import Task

logger = logging.getLogger(__name__)

def get_employees(db: Session) -> List[Employee]:
    statement = select(Employee).order_by(Employee.created_at.desc(), Employee.id.desc())
    rows = list(db.scalars(statement))
    logger.debug("Fetched %d employees", len(rows))
    return rows

def get_employee(db: Session, employee_id: int) -> Optional[Employee]:
    return db.get(Employee, employee_id)

def create_employee(db: Session, employee: EmployeeCreate) -> Employee:
    db_employee = Employee(
        name=employee.name,
        email=employee.email,
        role=employee.role,
        status=employee.status,
    )
    db.add(db_employee)
    db.commit()
    db.refresh(db_employee)
    logger.info("Employee created: id=%s email=%s", db_employee.id, db_employee.email)
    return db_employee

def update_employee(db: Session, employee_id: int, payload: EmployeeUpdate) -> Optional[Employee]:
    db_employee = db.get(Employee, employee_id)
    if not db_employee:
        return None
    db_employee.name = payload.name
    db_employee.email = payload.email
    db_employee.role = payload.role
    db_employee.status = payload.status
    db.commit()
    db.refresh(db_employee)
    logger.info("Employee updated: id=%s", employee_id)
    return db_employee

def delete_employee(db: Session, employee_id: int) -> Optional[int]:
    """
    Unassign the employee's tasks, then delete the employee, as one transaction.
    Returns the number of tasks unassigned, or None (nothing changed) if the employee does not exist.
    """
    try:
        unassigned = db.execute(
            update(Task).where(Task.employee_id == employee_id).values(employee_id=None)
        ).rowcount
        deleted = db.execute(delete(Employee).where(Employee.id == employee_id)).rowcount
        if deleted == 0:
            db.rollback()
            return None
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info("Employee deleted: id=%s, %d tasks unassigned", employee_id, unassigned)
    return unassigned
