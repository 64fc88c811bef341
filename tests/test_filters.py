"""Unit tests for the filter/sort engine."""

import pytest

from sharktank.catalog.filters import FilterState, SortSpec, apply
from sharktank.util.exceptions import InvalidSortFieldError


def _companies(deals):
    return [deal.company for deal in deals]


class TestApplyFilters:
    """Tests for apply() filtering."""

    def test_no_filters_no_sort_keeps_input(self, deals) -> None:
        assert apply(deals, FilterState(), None) == deals
        assert apply(deals) == deals

    def test_does_not_mutate_input(self, deals) -> None:
        before = list(deals)
        apply(deals, FilterState(seasons={2}), SortSpec("company", descending=True))
        assert deals == before

    def test_search_is_case_insensitive_substring(self, deals) -> None:
        assert _companies(apply(deals, FilterState(search="tech"))) == ["Acme", "Drone", "Eco"]

    @pytest.mark.parametrize(
        "term, expected",
        [
            ("ACME", ["Acme"]),
            ("food", ["bolo", "Cafe"]),
            ("davi", ["Cafe"]),
            ("caito", ["Acme", "Cafe"]),
            ("drones", ["Drone"]),
            ("nothing-like-this", []),
        ],
    )
    def test_search_covers_every_text_field(self, deals, term, expected) -> None:
        assert _companies(apply(deals, FilterState(search=term))) == expected

    def test_dimensions_combine_with_and(self, deal_factory) -> None:
        deals = [
            deal_factory(1, 1, "A", category="Tech"),
            deal_factory(1, 2, "B", category="Food"),
            deal_factory(2, 1, "C", category="Tech"),
        ]
        assert _companies(apply(deals, FilterState(seasons={1}, categories={"Tech"}))) == ["A"]

    def test_values_within_a_dimension_combine_with_or(self, deals) -> None:
        assert _companies(apply(deals, FilterState(seasons={1, 3}))) == ["Acme", "bolo", "Eco"]

    def test_status(self, deals) -> None:
        assert _companies(apply(deals, FilterState(status={True}))) == ["Acme", "Cafe", "Eco"]
        assert _companies(apply(deals, FilterState(status={False}))) == ["bolo", "Drone"]
        assert len(apply(deals, FilterState(status={True, False}))) == len(deals)

    def test_participants_any_overlap(self, deals) -> None:
        assert _companies(apply(deals, FilterState(participants={"Davi", "Eva"}))) == ["Cafe", "Drone"]

    def test_investors_any_overlap(self, deals) -> None:
        assert _companies(apply(deals, FilterState(investors={"Caito Maia"}))) == ["Acme", "Cafe"]

    def test_investment_bounds_are_inclusive(self, deals) -> None:
        state = FilterState(min_investment=50000, max_investment=120000)
        assert _companies(apply(deals, state)) == ["bolo", "Cafe", "Eco"]

    def test_single_investment_bound(self, deals) -> None:
        assert _companies(apply(deals, FilterState(min_investment=200000))) == ["Acme", "Drone"]
        assert _companies(apply(deals, FilterState(max_investment=50000))) == ["bolo", "Eco"]

    def test_result_is_subset_in_input_order(self, deals) -> None:
        result = apply(deals, FilterState(categories={"Tech", "Food"}, status={True}))
        assert all(deal in deals for deal in result)
        assert result == [deal for deal in deals if deal in result]


class TestSort:
    """Tests for apply() sorting."""

    def test_strings_sort_case_insensitively(self, deals) -> None:
        assert _companies(apply(deals, None, SortSpec("company"))) == ["Acme", "bolo", "Cafe", "Drone", "Eco"]

    def test_descending(self, deals) -> None:
        result = apply(deals, None, SortSpec("amount_requested", descending=True))
        assert [deal.amount_requested for deal in result] == [300000, 200000, 120000, 50000, 50000]

    def test_ties_keep_input_order_both_directions(self, deals) -> None:
        asc = apply(deals, None, SortSpec("amount_requested"))
        desc = apply(deals, None, SortSpec("amount_requested", descending=True))
        # bolo precedes Eco in the input, both request 50000
        assert _companies(asc)[:2] == ["bolo", "Eco"]
        assert _companies(desc)[-2:] == ["bolo", "Eco"]

    def test_missing_values_sort_last(self, deals) -> None:
        for descending in (False, True):
            result = apply(deals, None, SortSpec("amount_negotiated", descending=descending))
            assert _companies(result)[-2:] == ["bolo", "Drone"]

    def test_filter_then_sort(self, deals) -> None:
        result = apply(deals, FilterState(status={True}), SortSpec("season", descending=True))
        assert _companies(result) == ["Eco", "Cafe", "Acme"]


class TestSortSpec:
    """Tests for SortSpec.parse()."""

    def test_plain_field_is_ascending(self) -> None:
        assert SortSpec.parse("company") == SortSpec("company", False)

    def test_desc_suffix(self) -> None:
        assert SortSpec.parse("amount_requested-desc") == SortSpec("amount_requested", True)

    def test_empty_means_no_sort(self) -> None:
        assert SortSpec.parse("") is None
        assert SortSpec.parse(None) is None

    def test_unknown_field_is_rejected(self) -> None:
        with pytest.raises(InvalidSortFieldError):
            SortSpec.parse("valuation-desc")

    def test_str_round_trips(self) -> None:
        assert str(SortSpec.parse("season-desc")) == "season-desc"


def test_filter_state_clear() -> None:
    state = FilterState(search="x", seasons={1}, min_investment=5)
    assert not state.is_empty()
    state.clear()
    assert state.is_empty()
    assert state == FilterState()


def test_filter_state_copy_is_independent() -> None:
    state = FilterState(search="x", seasons={1}, investors={"Caito"})
    copied = state.copy()
    assert copied == state

    copied.seasons.add(2)
    copied.investors.clear()
    assert state.seasons == {1}
    assert state.investors == {"Caito"}
