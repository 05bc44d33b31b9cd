"""Tests for Filter, PageOptions and MonthlyTotal."""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from ledger.domain.transactions import Filter, MonthlyTotal, PageOptions, Transaction


def _transaction(**overrides) -> Transaction:
    defaults = {
        "id": 1,
        "category": "Groceries",
        "transactee": "Bob",
        "date": date(2022, 12, 11),
        "amount": Decimal("-5"),
    }
    defaults.update(overrides)
    return Transaction(**defaults)


class TestFilter:
    """Test cases for Filter."""

    def test_none_filter_matches_everything(self):
        assert Filter.NONE.is_empty
        assert Filter.NONE.matches(_transaction(transactee=None))

    def test_accepts_from_alias(self):
        f = Filter.model_validate({"from": "2022-12-01"})

        assert f.from_date == date(2022, 12, 1)
        assert not f.is_empty

    def test_bounds_are_inclusive(self):
        f = Filter(from_date=date(2022, 12, 11), until=date(2022, 12, 11))

        assert f.matches(_transaction(date=date(2022, 12, 11)))
        assert not f.matches(_transaction(date=date(2022, 12, 10)))
        assert not f.matches(_transaction(date=date(2022, 12, 12)))

    def test_category_is_exact(self):
        f = Filter(category="Groceries")

        assert f.matches(_transaction())
        assert not f.matches(_transaction(category="groceries"))

    def test_transactee_filter_never_matches_missing_transactee(self):
        f = Filter(transactee="Bob")

        assert f.matches(_transaction())
        assert not f.matches(_transaction(transactee=None))


class TestPageOptions:
    """Test cases for PageOptions."""

    def test_apply_slices_window(self):
        page = PageOptions(offset=1, limit=2)

        assert page.apply(["a", "b", "c"]) == ["b", "c"]

    def test_offset_beyond_end_is_empty(self):
        assert PageOptions(offset=10, limit=5).apply(["a"]) == []

    def test_offset_defaults_to_zero(self):
        assert PageOptions(limit=1).apply(["a", "b"]) == ["a"]

    @pytest.mark.parametrize("kwargs", [{"offset": -1, "limit": 1}, {"limit": 0}])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValidationError):
            PageOptions(**kwargs)


class TestMonthlyTotal:
    """Test cases for MonthlyTotal."""

    def test_month_must_be_first_day(self):
        with pytest.raises(ValidationError, match="first day of a month"):
            MonthlyTotal(month=date(2022, 12, 2))
