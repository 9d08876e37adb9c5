"""
Shared pytest fixtures for timesheet-api tests.
"""
import datetime

import pytest
from fastapi.testclient import TestClient

from timesheet_api.api import create_app
from timesheet_api.config import Config
from timesheet_api.db import DB
from timesheet_api.models import TimesheetEntry
from timesheet_api.repository import TimesheetEntryRepository


@pytest.fixture
def db_url(tmp_path):
    """
    SQLite database file unique to each test.
    """
    return f"sqlite:///{tmp_path / 'timesheet.db'}"


@pytest.fixture
def db(db_url):
    """
    Connected DB with the schema created, disposed after the test.
    """
    test_db = DB(db_url)
    test_db.create_db()
    yield test_db
    test_db.disconnect()


@pytest.fixture
def repo(db):
    return TimesheetEntryRepository(db)


@pytest.fixture
def app_config(db_url):
    return Config(db_url=db_url)


@pytest.fixture
def client(app_config, db):
    """
    TestClient for an app sharing the test database.
    """
    with TestClient(create_app(app_config, db)) as test_client:
        yield test_client


@pytest.fixture
def alice_entry():
    return TimesheetEntry(
        employee_name="Alice",
        project="Apollo",
        work_date=datetime.date(2024, 1, 5),
        hours=8,
    )


@pytest.fixture
def alice_payload():
    return {
        "employeeName": "Alice",
        "project": "Apollo",
        "workDate": "2024-01-05",
        "hours": 8,
    }
