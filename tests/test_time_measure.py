import time

import pytest

from acidkit.time_measure import TimeMeasure, group_thousands


def test_group_thousands_pinned():
    assert group_thousands(1234567) == "1,234,567"


@pytest.mark.parametrize("number", [0, 7, 999])
def test_group_thousands_short_numbers_unchanged(number):
    assert group_thousands(number) == str(number)


@pytest.mark.parametrize("number", [1000, 65536, 10**12 + 5])
def test_group_thousands_removing_commas_gives_number(number):
    text = group_thousands(number)
    assert int(text.replace(",", "")) == number
    assert all(len(part) == 3 for part in text.split(",")[1:])


def test_elapsed_after_sleep():
    watch = TimeMeasure()
    time.sleep(0.02)
    assert watch.elapsed() >= 20
    assert watch.elapsed_micro() >= 20_000
    assert watch.elapsed_nano() >= 20_000_000


def test_units_are_consistent():
    watch = TimeMeasure()
    time.sleep(0.005)
    ms = watch.elapsed()
    us = watch.elapsed_micro()
    assert us >= ms * 1000
    assert watch.elapsed_seconds() <= ms // 1000 + 1
    assert watch.elapsed_minutes() == 0
    assert watch.elapsed_hours() == 0


def test_reset_restarts():
    watch = TimeMeasure()
    time.sleep(0.02)
    before = watch.elapsed_nano()
    watch.reset()
    assert watch.elapsed_nano() < before


def test_report_contents():
    text = TimeMeasure().report()
    assert "cost:" in text
    assert "micro:" in text
    assert "nano:" in text


def test_context_manager_prints_report(capsys):
    with TimeMeasure() as watch:
        time.sleep(0.001)
    assert watch.elapsed_nano() >= 1_000_000
    assert "cost:" in capsys.readouterr().out