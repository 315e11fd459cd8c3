import pytest
from fastapi.testclient import TestClient

from timesheet_tracker.main import create_app
from timesheet_tracker.store import TimesheetStore


@pytest.fixture
def store():
    return TimesheetStore(version="9.9.9")


@pytest.fixture
def client(store):
    app = create_app(store, static_dir=None)
    return TestClient(app)


def make_entry(name="Alice", date="2024-01-01", hours=8, project="Testing"):
    return {"name": name, "date": date, "hours": hours, "project": project}
