from datetime import date, datetime

from smart_office.reports.calculator.standard_calculator import StandardWorkedTimeCalculator
from smart_office.reports.model import DaySummary


def _day(first_in, last_out):
    return DaySummary(work_date=date(2025, 1, 6), first_check_in=first_in, last_check_out=last_out)


def test_standard_calculator_whole_minutes():
    calc = StandardWorkedTimeCalculator()

    assert calc.worked_minutes(_day(datetime(2025, 1, 6, 9, 0), datetime(2025, 1, 6, 17, 30, 45))) == 8 * 60 + 30


def test_standard_calculator_incomplete_days():
    calc = StandardWorkedTimeCalculator()
    nine = datetime(2025, 1, 6, 9, 0)

    assert calc.worked_minutes(_day(nine, None)) is None
    assert calc.worked_minutes(_day(None, nine)) is None
    assert calc.worked_minutes(_day(nine, nine)) is None
