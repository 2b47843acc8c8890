from datetime import date, timedelta

import pytest

from src.ethio_hr.ethio_hr.core.exceptions import CalendarConversionError
from src.ethio_hr.ethio_hr.ethiopian_calendar.conversion import (
    gregorian_to_jdn,
    is_ethiopian_leap_year,
    pagume_length,
    to_ethiopian,
    to_gregorian,
)


def test_enkutatash_2016_is_twelfth_of_september_2023():
    eth = to_ethiopian(date(2023, 9, 12))

    assert (eth.year, eth.month, eth.day) == (2016, 1, 1)
    assert eth.month_name == "Meskerem"
    assert eth.day_name == "Maksegno"
    assert eth.format() == "1 Meskerem 2016 (Maksegno)"
    assert gregorian_to_jdn(date(2023, 9, 12)) == 2460200


def test_day_before_enkutatash_after_leap_year_is_pagume_6():
    eth = to_ethiopian(date(2023, 9, 11))

    assert (eth.year, eth.month, eth.day) == (2015, 13, 6)
    assert eth.month_name == "Pagume"


def test_to_gregorian_inverts_known_dates():
    assert to_gregorian(2016, 1, 1) == date(2023, 9, 12)
    assert to_gregorian(2015, 13, 6) == date(2023, 9, 11)
    assert to_gregorian(2017, 1, 1) == date(2024, 9, 11)


def test_leap_years_follow_year_mod_4():
    assert is_ethiopian_leap_year(2015)
    assert not is_ethiopian_leap_year(2016)
    assert pagume_length(2015) == 6
    assert pagume_length(2016) == 5


def test_round_trip_over_three_decades():
    d = date(2000, 1, 1)
    end = date(2030, 12, 31)
    while d <= end:
        eth = to_ethiopian(d)
        assert to_gregorian(eth.year, eth.month, eth.day) == d
        d += timedelta(days=1)


def test_round_trip_near_the_edges_of_the_range():
    for d in (date(9, 1, 1), date(1582, 10, 15), date(9999, 12, 31)):
        eth = to_ethiopian(d)
        assert to_gregorian(eth.year, eth.month, eth.day) == d


@pytest.mark.parametrize(
    "year, month, day",
    [
        (2016, 0, 1),
        (2016, 14, 1),
        (2016, 1, 31),
        (2016, 13, 6),
        (2015, 13, 7),
        (0, 1, 1),
    ],
)
def test_invalid_ethiopian_components_are_rejected(year, month, day):
    with pytest.raises(CalendarConversionError):
        to_gregorian(year, month, day)


def test_dates_before_the_epoch_are_out_of_range():
    with pytest.raises(CalendarConversionError):
        to_ethiopian(date(1, 1, 1))
