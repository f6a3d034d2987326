import unittest

from sqlalchemy.exc import IntegrityError

from core.database import Database
from employee.models import Employee, EmployeeStatus
from employee import service
from employee.schema import EmployeeCreate, EmployeeUpdate
from task.models import Task


class EmployeeServiceTests(unittest.TestCase):
    def setUp(self):
        # Fresh in-memory DB
        self.database = Database("sqlite://").open()
        self.database.create_schema()
        self.db = self.database.session()

        # --- seed employees ---
        e1 = Employee(name="Kalli", email="kalli@example.com", role="Engineer")
        e2 = Employee(name="Palli", email="palli@example.com", role="Designer", status=EmployeeStatus.INACTIVE)
        self.db.add_all([e1, e2])
        self.db.commit()
        self.db.refresh(e1); self.db.refresh(e2)
        self.kalli_id = e1.id
        self.palli_id = e2.id

    def tearDown(self):
        self.db.close()
        self.database.close()

    # ---- get_employee ----
    def test_get_employee_found(self):
        got = service.get_employee(self.db, self.kalli_id)
        self.assertIsNotNone(got)
        self.assertEqual(got.email, "kalli@example.com")
        self.assertEqual(got.status, EmployeeStatus.ACTIVE)
        self.assertIsNotNone(got.created_at)

    def test_get_employee_not_found(self):
        self.assertIsNone(service.get_employee(self.db, 999999))

    # ---- get_employees ----
    def test_get_employees_newest_first(self):
        service.create_employee(self.db, EmployeeCreate(name="Jonas", email="jonas@example.com", role="QA"))
        rows = service.get_employees(self.db)
        self.assertEqual([r.name for r in rows], ["Jonas", "Palli", "Kalli"])

    # ---- create_employee ----
    def test_create_employee_defaults_to_active(self):
        created = service.create_employee(self.db, EmployeeCreate(name="Ann", email="a@x.com", role="QA"))
        self.assertIsInstance(created.id, int)
        self.assertEqual(created.status, EmployeeStatus.ACTIVE)
        self.assertIsNotNone(created.created_at)

    def test_create_employee_duplicate_email_keeps_original(self):
        with self.assertRaises(IntegrityError):
            service.create_employee(self.db, EmployeeCreate(name="Other", email="kalli@example.com", role="QA"))
        self.db.rollback()

        original = service.get_employee(self.db, self.kalli_id)
        self.assertEqual(original.name, "Kalli")
        self.assertEqual(original.role, "Engineer")
        self.assertEqual(len(service.get_employees(self.db)), 2)

    # ---- update_employee ----
    def test_update_employee_replaces_every_field(self):
        payload = EmployeeUpdate(name="Karl", email="karl@example.com", role="Lead", status="INACTIVE")
        updated = service.update_employee(self.db, self.kalli_id, payload)
        self.assertEqual(updated.name, "Karl")
        self.assertEqual(updated.email, "karl@example.com")
        self.assertEqual(updated.role, "Lead")
        self.assertEqual(updated.status, EmployeeStatus.INACTIVE)

    def test_update_employee_not_found_returns_none(self):
        payload = EmployeeUpdate(name="X", email="x@example.com", role="X", status="ACTIVE")
        self.assertIsNone(service.update_employee(self.db, 999999, payload))

    def test_update_employee_email_collision(self):
        payload = EmployeeUpdate(name="Kalli", email="palli@example.com", role="Engineer", status="ACTIVE")
        with self.assertRaises(IntegrityError):
            service.update_employee(self.db, self.kalli_id, payload)
        self.db.rollback()
        self.assertEqual(service.get_employee(self.db, self.kalli_id).email, "kalli@example.com")

    def test_update_employee_keeping_own_email_is_fine(self):
        payload = EmployeeUpdate(name="Kalli K", email="kalli@example.com", role="Engineer", status="ACTIVE")
        updated = service.update_employee(self.db, self.kalli_id, payload)
        self.assertEqual(updated.name, "Kalli K")

    # ---- delete_employee ----
    def test_delete_employee_unassigns_their_tasks(self):
        t1 = Task(title="one", employee_id=self.kalli_id)
        t2 = Task(title="two", employee_id=self.kalli_id)
        t3 = Task(title="three", employee_id=self.palli_id)
        self.db.add_all([t1, t2, t3])
        self.db.commit()
        ids = [t1.id, t2.id, t3.id]

        unassigned = service.delete_employee(self.db, self.kalli_id)
        self.assertEqual(unassigned, 2)
        self.assertIsNone(service.get_employee(self.db, self.kalli_id))

        tasks = [self.db.get(Task, i) for i in ids]
        self.assertEqual([t.employee_id for t in tasks], [None, None, self.palli_id])
        self.assertEqual(tasks[0].employee_name, "Unassigned")
        self.assertEqual(tasks[2].employee_name, "Palli")

    def test_delete_employee_without_tasks(self):
        self.assertEqual(service.delete_employee(self.db, self.palli_id), 0)
        self.assertIsNone(service.get_employee(self.db, self.palli_id))

    def test_delete_employee_not_found_returns_none(self):
        self.assertIsNone(service.delete_employee(self.db, 999999))
        self.assertEqual(len(service.get_employees(self.db)), 2)


if __name__ == "__main__":
    unittest.main()
