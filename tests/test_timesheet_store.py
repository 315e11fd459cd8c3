from timesheet_tracker.store import TimesheetStore, format_total_hours

from conftest import make_entry


def test_empty_store_lists_zero():
    s = TimesheetStore()
    assert s.list() == {"total": 0, "totalHours": "0.0", "timesheets": []}


def test_submit_copies_fields_and_stamps_timestamp_and_id():
    s = TimesheetStore()
    entry = s.submit({**make_entry(), "extra": "kept"})
    assert entry["name"] == "Alice"
    assert entry["extra"] == "kept"
    assert isinstance(entry["id"], int)
    assert entry["timestamp"].endswith("Z")


def test_submit_overrides_caller_timestamp_and_id():
    s = TimesheetStore()
    entry = s.submit({"name": "Bob", "timestamp": "yesterday", "id": 1})
    assert entry["timestamp"] != "yesterday"
    assert entry["id"] != 1


def test_total_counts_every_submission():
    s = TimesheetStore()
    for i in range(25):
        s.submit(make_entry(name=f"Emp {i}"))
    assert s.list()["total"] == 25
    assert s.info()["totalTimesheets"] == 25


def test_recent_is_last_ten_newest_first():
    s = TimesheetStore()
    for i in range(11):
        s.submit(make_entry(name=f"Emp {i}"))
    recent = s.list()["timesheets"]
    assert len(recent) == 10
    assert [e["name"] for e in recent] == [f"Emp {i}" for i in range(10, 0, -1)]


def test_recent_with_fewer_than_ten():
    s = TimesheetStore()
    s.submit(make_entry(name="first"))
    s.submit(make_entry(name="second"))
    assert [e["name"] for e in s.list()["timesheets"]] == ["second", "first"]


def test_total_hours_sums_to_one_decimal():
    s = TimesheetStore()
    for h in (7.5, 0.5, 1):
        s.submit(make_entry(hours=h))
    assert s.list()["totalHours"] == "9.0"


def test_total_hours_is_nan_for_non_numeric_hours():
    assert format_total_hours([{"hours": 8}, {"hours": "8"}]) == "NaN"
    assert format_total_hours([{"hours": 8}, {"name": "no hours"}]) == "NaN"
    assert format_total_hours([{"hours": True}]) == "NaN"


def test_malformed_entries_are_stored_as_is():
    s = TimesheetStore()
    s.submit({"hours": "lots"})
    listing = s.list()
    assert listing["total"] == 1
    assert listing["timesheets"][0]["hours"] == "lots"


def test_reads_are_idempotent():
    s = TimesheetStore()
    s.submit(make_entry())
    assert s.list() == s.list()
    assert s.info() == s.info()


def test_stored_entries_cannot_be_mutated_by_callers():
    s = TimesheetStore()
    entry = s.submit(make_entry())
    entry["name"] = "Mallory"
    s.list()["timesheets"][0]["hours"] = 99
    stored = s.list()["timesheets"][0]
    assert stored["name"] == "Alice"
    assert stored["hours"] == 8


def test_request_count_only_increases():
    s = TimesheetStore()
    assert s.request_count == 0
    assert [s.count_request() for _ in range(3)] == [1, 2, 3]
    assert s.info()["totalRequests"] == 3


def test_health_check_is_healthy():
    s = TimesheetStore()
    h = s.health_check()
    assert h["status"] == "healthy"
    assert h["uptime"] >= 0
    assert h["timestamp"].endswith("Z")


def test_info_reports_version_and_deployment_time():
    s = TimesheetStore(version="2.3.4")
    info = s.info()
    assert info["version"] == "2.3.4"
    assert info["status"] == "running"
    assert info["deploymentTime"] == s.deployment_time


def test_null_hours_add_nothing():
    assert format_total_hours([{"hours": 8}, {"hours": None}]) == "8.0"
    assert format_total_hours([{"hours": None}]) == "0.0"


def test_total_hours_for_extreme_values_is_a_string():
    huge = int("9" * 400)
    assert format_total_hours([{"hours": huge}]) == "Infinity"
    assert format_total_hours([{"hours": -huge}]) == "-Infinity"
    assert format_total_hours([{"hours": huge}, {"hours": -huge}]) == "NaN"
    assert format_total_hours([{"hours": 1e308}, {"hours": 1e308}]) == "Infinity"
    assert format_total_hours([{"hours": float("inf")}]) == "Infinity"
    assert format_total_hours([{"hours": float("nan")}, {"hours": 8}]) == "NaN"


def test_non_finite_hours_are_listed_as_null():
    s = TimesheetStore()
    echoed = s.submit({"name": "x", "hours": float("nan")})
    s.submit({"name": "y", "hours": float("inf")})
    assert echoed["hours"] is None
    assert [e["hours"] for e in s.list()["timesheets"]] == [None, None]


def test_recent_list_is_capped_at_ten():
    s = TimesheetStore()
    for i in range(50):
        s.submit(make_entry(name=f"Emp {i}"))
    recent = s.list()["timesheets"]
    assert len(recent) == 10
    assert recent[0]["name"] == "Emp 49"
