import tempfile
import unittest
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.exc import IntegrityError

from core.database import Base
import models_bootstrap

ROOT = Path(__file__).resolve().parents[2]


class MigrationTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.url = f"sqlite:///{Path(self.tmp.name) / 'migrated.sqlite'}"

        self.cfg = Config(str(ROOT / "alembic.ini"))
        self.cfg.set_main_option("script_location", str(ROOT / "alembic"))
        self.cfg.attributes["database_url"] = self.url
        self.cfg.attributes["configure_logger"] = False

        command.upgrade(self.cfg, "head")
        self.engine = create_engine(self.url)

    def tearDown(self):
        self.engine.dispose()
        self.tmp.cleanup()

    def test_tables_and_columns_match_models(self):
        insp = inspect(self.engine)
        self.assertTrue({"employees", "tasks", "alembic_version"} <= set(insp.get_table_names()))
        for name, table in Base.metadata.tables.items():
            reflected = {c["name"] for c in insp.get_columns(name)}
            self.assertEqual(reflected, {c.name for c in table.columns}, name)

    def test_email_unique_and_task_fk_sets_null(self):
        insp = inspect(self.engine)

        uniques = [u["column_names"] for u in insp.get_unique_constraints("employees")]
        self.assertIn(["email"], uniques)

        fks = insp.get_foreign_keys("tasks")
        self.assertEqual(len(fks), 1)
        self.assertEqual(fks[0]["referred_table"], "employees")
        self.assertEqual(fks[0]["constrained_columns"], ["employee_id"])
        self.assertEqual(fks[0]["options"].get("ondelete"), "SET NULL")

        index_names = {i["name"] for i in insp.get_indexes("tasks")}
        self.assertTrue({"ix_tasks_employee_id", "ix_tasks_created"} <= index_names)

    def test_migrated_schema_enforces_constraints(self):
        with self.engine.begin() as conn:
            conn.execute(text("INSERT INTO employees (name, email, role) VALUES ('Ann', 'a@x.com', 'QA')"))
            emp_id = conn.execute(text("SELECT id FROM employees")).scalar_one()
            conn.execute(text("INSERT INTO tasks (title, employee_id) VALUES ('T1', :e)"), {"e": emp_id})

        with self.assertRaises(IntegrityError):
            with self.engine.begin() as conn:
                conn.execute(text("INSERT INTO employees (name, email, role) VALUES ('Bob', 'a@x.com', 'QA')"))

        with self.engine.begin() as conn:
            row = conn.execute(text("SELECT status, created_at FROM employees")).one()
            self.assertEqual(row.status, "ACTIVE")
            self.assertIsNotNone(row.created_at)

            task = conn.execute(text("SELECT status, priority, description FROM tasks")).one()
            self.assertEqual((task.status, task.priority, task.description), ("TODO", "MEDIUM", ""))

            conn.execute(text("DELETE FROM employees WHERE id = :e"), {"e": emp_id})
            self.assertIsNone(conn.execute(text("SELECT employee_id FROM tasks")).scalar_one())

    def test_downgrade_drops_tables(self):
        command.downgrade(self.cfg, "base")
        names = set(inspect(self.engine).get_table_names())
        self.assertFalse({"employees", "tasks"} & names)


if __name__ == "__main__":
    unittest.main()
