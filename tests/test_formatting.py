import datetime as dt
import locale
from decimal import Decimal

import pytest

from formatting import MONTH_NAMES, NBSP, currency, date_label, month_label, month_start


class TestMonthLabel:

    def test_long_month_and_year(self):
        assert month_label("2024-03") == "March 2024"
        assert month_label("1999-12") == "December 1999"

    def test_unknown_bucket(self):
        assert month_label("unknown") == "Unknown date"

    @pytest.mark.parametrize("key", ["NaN-NaN", "2024-13", "2024", "", "24-03"])
    def test_malformed_key_is_shown_as_is(self, key):
        assert month_label(key) == key

    def test_non_string(self):
        assert month_label(None) == "None"

    def test_every_month_name(self):
        labels = [month_label(f"2023-{m:02d}") for m in range(1, 13)]
        assert labels == [f"{name} 2023" for name in MONTH_NAMES]
        assert labels[0] == "January 2023"
        assert labels[-1] == "December 2023"

    def test_ignores_process_locale(self):
        try:
            previous = locale.setlocale(locale.LC_TIME)
            locale.setlocale(locale.LC_TIME, "de_DE.UTF-8")
        except locale.Error:
            pytest.skip("de_DE locale is not installed")
        try:
            assert month_label("2024-03") == "March 2024"
        finally:
            locale.setlocale(locale.LC_TIME, previous)


def test_month_start():
    assert month_start("2024-02") == dt.date(2024, 2, 1)
    with pytest.raises(ValueError):
        month_start("2024-2")


class TestCurrency:

    def test_grouping_and_suffix(self):
        assert currency(Decimal("-1234567")) == f"-1{NBSP}234{NBSP}567,00{NBSP}Ft"

    def test_small_and_fractional(self):
        assert currency(Decimal("250")) == f"250,00{NBSP}Ft"
        assert currency(Decimal("1999.5")) == f"1{NBSP}999,50{NBSP}Ft"

    def test_zero_has_no_sign(self):
        assert currency(Decimal("-0")) == f"0,00{NBSP}Ft"
        assert currency(0) == f"0,00{NBSP}Ft"

    def test_accepts_strings_and_numbers(self):
        assert currency("-500") == f"-500,00{NBSP}Ft"
        assert currency(2000) == f"2{NBSP}000,00{NBSP}Ft"

    @pytest.mark.parametrize("value", ["abc", None, "NaN", float("inf")])
    def test_non_numeric_falls_back(self, value):
        assert currency(value) == "-"


class TestDateLabel:

    def test_date(self):
        assert date_label(dt.date(2024, 3, 5)) == "2024-03-05"

    def test_datetime(self):
        assert date_label(dt.datetime(2024, 3, 5, 13, 30)) == "2024-03-05"

    def test_missing(self):
        assert date_label(None) == "Unknown date"
