"""Unit tests for PromotionRule matching and validity."""

from datetime import date

import pytest

from pos.domain.exceptions import ValidationError
from tests.builders import make_rule


class TestCategoryMatching:

    def test_wildcard_matches_everything(self):
        rule = make_rule(category_group="ALL")
        assert rule.matches_category("01")
        assert rule.matches_category("09")
        assert rule.matches_category("")

    def test_wildcard_is_case_insensitive(self):
        assert make_rule(category_group="all").matches_category("05")

    def test_single_category(self):
        rule = make_rule(category_group="01")
        assert rule.matches_category("01")
        assert not rule.matches_category("02")

    def test_list_entries_are_trimmed(self):
        rule = make_rule(category_group=" 01 , 02 ,09")
        assert rule.matches_category("01")
        assert rule.matches_category("02")
        assert rule.matches_category("09")
        assert not rule.matches_category("05")

    def test_list_matching_is_case_insensitive(self):
        rule = make_rule(category_group="a1,B2")
        assert rule.matches_category("A1")
        assert rule.matches_category("b2")

    def test_no_partial_matches(self):
        assert not make_rule(category_group="010").matches_category("01")

    def test_empty_group_matches_nothing(self):
        assert not make_rule(category_group="").matches_category("01")

    def test_categories_are_normalised(self):
        assert make_rule(category_group=" a1, 02,").categories == frozenset({"A1", "02"})


class TestValidity:

    def test_inclusive_at_both_ends(self):
        rule = make_rule(start=date(2025, 11, 1), end=date(2025, 11, 30))
        assert rule.is_active_on(date(2025, 11, 1))
        assert rule.is_active_on(date(2025, 11, 30))

    def test_outside_window(self):
        rule = make_rule(start=date(2025, 11, 1), end=date(2025, 11, 30))
        assert not rule.is_active_on(date(2025, 10, 31))
        assert not rule.is_active_on(date(2025, 12, 1))

    def test_single_day_rule(self):
        rule = make_rule(start=date(2025, 11, 11), end=date(2025, 11, 11))
        assert rule.is_active_on(date(2025, 11, 11))

    def test_inverted_window_rejected(self):
        with pytest.raises(ValidationError, match="before it starts"):
            make_rule(start=date(2025, 12, 1), end=date(2025, 11, 1))
