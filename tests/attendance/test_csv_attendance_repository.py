from datetime import date, datetime

from smart_office.attendance.csv_attendance_repository import CsvAttendanceRepository
from smart_office.attendance.model import AttendanceEvent
from smart_office.core.enums import Direction
from smart_office.core.failures import IOFailure
from smart_office.reports.service import AttendanceReportService


def _event(emp_id, name, direction, ts):
    return AttendanceEvent(employee_id=emp_id, employee_name=name, method="RFID", direction=direction, timestamp=ts)


def _seed(repo):
    repo.append(_event(1, "Alice", Direction.CHECK_IN, datetime(2025, 1, 5, 9, 0)))
    repo.append(_event(2, "Bob", Direction.CHECK_IN, datetime(2025, 1, 6, 8, 0)))
    repo.append(_event(1, "Alice", Direction.CHECK_OUT, datetime(2025, 1, 6, 17, 0)))
    repo.append(_event(2, "Bob", Direction.CHECK_OUT, datetime(2025, 1, 7, 18, 0)))


def test_missing_file_is_empty_store(tmp_path):
    repo = CsvAttendanceRepository(tmp_path / "attendance.csv")

    assert repo.all_records() == []
    assert repo.load_failure is None


def test_append_writes_one_line_per_event_without_header(tmp_path):
    path = tmp_path / "attendance.csv"
    repo = CsvAttendanceRepository(path)

    assert repo.append(_event(1, "Alice", Direction.CHECK_IN, datetime(2025, 1, 6, 9, 0))) is None

    assert path.read_text(encoding="utf-8") == "1,Alice,RFID,1,2025-01-06T09:00:00\n"


def test_reload_is_idempotent_and_keeps_file_order(tmp_path):
    path = tmp_path / "attendance.csv"
    _seed(CsvAttendanceRepository(path))

    first = CsvAttendanceRepository(path).all_records()
    second = CsvAttendanceRepository(path).all_records()

    assert first == second
    assert [r.employee_id for r in first] == [1, 2, 1, 2]


def test_bad_lines_are_skipped(tmp_path):
    path = tmp_path / "attendance.csv"
    path.write_text(
        "1,Alice,RFID,1,2025-01-06T09:00:00\n"
        "garbage\n"
        "\n"
        "2,Bob,RFID,1,not-a-time\n"
        "2,Bob,RFID,0,2025-01-06T18:00:00\n",
        encoding="utf-8",
    )

    repo = CsvAttendanceRepository(path)

    assert [r.employee_name for r in repo.all_records()] == ["Alice", "Bob"]
    assert len(repo.skipped) == 2


def test_all_records_returns_a_copy(tmp_path):
    repo = CsvAttendanceRepository(tmp_path / "attendance.csv")
    _seed(repo)

    snapshot = repo.all_records()
    snapshot.clear()

    assert len(repo.all_records()) == 4


def test_records_on_and_between(tmp_path):
    repo = CsvAttendanceRepository(tmp_path / "attendance.csv")
    _seed(repo)

    assert [r.employee_id for r in repo.records_on(date(2025, 1, 6))] == [2, 1]
    assert len(repo.records_between(date(2025, 1, 5), date(2025, 1, 6))) == 3
    assert repo.records_between(date(2025, 1, 8), date(2025, 1, 9)) == []
    for d in (date(2025, 1, 5), date(2025, 1, 6), date(2025, 1, 7), date(2025, 1, 8)):
        assert repo.records_between(d, d) == repo.records_on(d)


def test_write_failure_is_reported_but_event_kept(tmp_path):
    path = tmp_path / "missing-dir" / "attendance.csv"
    repo = CsvAttendanceRepository(path)

    failure = repo.append(_event(1, "Alice", Direction.CHECK_IN, datetime(2025, 1, 6, 9, 0)))

    assert isinstance(failure, IOFailure)
    assert failure.path == path
    assert len(repo.all_records()) == 1


def test_offset_and_date_only_lines_are_skipped_and_reports_still_run(tmp_path):
    path = tmp_path / "attendance.csv"
    path.write_text(
        "1,Alice,RFID,1,2025-01-06T09:00:00\n"
        "1,Alice,RFID,0,2025-01-06T17:30:00+00:00\n"
        "1,Alice,RFID,0,2025-01-06\n"
        "1,Alice,RFID,0,2025-01-06T17:00:00\n",
        encoding="utf-8",
    )

    repo = CsvAttendanceRepository(path)
    row = AttendanceReportService(repo, report_dir=tmp_path).daily_report(date(2025, 1, 6)).rows[0]

    assert len(repo.all_records()) == 2
    assert len(repo.skipped) == 2
    assert all(r.timestamp.tzinfo is None for r in repo.all_records())
    assert (row["lastCheckOut"], row["totalHours"]) == ("17:00:00", "8.00")
