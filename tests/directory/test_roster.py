from smart_office.directory.in_memory_directory import DEMO_ROSTER, load_roster_csv
from smart_office.directory.model import Employee


def test_no_roster_path_uses_demo_roster():
    directory = load_roster_csv(None)

    assert directory.get_by_id(1).name == "Alice"
    assert len(directory.list_all()) == len(DEMO_ROSTER)


def test_missing_roster_file_uses_demo_roster(tmp_path):
    directory = load_roster_csv(tmp_path / "nope.csv")

    assert directory.get_by_id(3).department == "QA"


def test_roster_csv_skips_bad_ids(tmp_path):
    roster = tmp_path / "roster.csv"
    roster.write_text(
        "employee_id,name,department\n"
        "10,Dana,Ops\n"
        "abc,Broken,Ops\n"
        "11,Eve,\n",
        encoding="utf-8",
    )

    directory = load_roster_csv(roster)

    assert [e.employee_id for e in directory.list_all()] == [10, 11]
    assert directory.get_by_id(11) == Employee(employee_id=11, name="Eve", department=None)
    assert directory.get_by_id(1) is None

