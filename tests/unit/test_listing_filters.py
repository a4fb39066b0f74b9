"""Unit tests for the filter engine."""
from decimal import Decimal

import pytest

from src.domain.entities.listing import Listing
from src.domain.enums.filter_operator import FilterOperator
from src.domain.filters.listing_filters import (
    AddressFilter,
    CompositeFilter,
    PriceRangeFilter,
)


def _listing(address: str, price: str) -> Listing:
    return Listing.create(address, Decimal(price))


@pytest.fixture()
def listings() -> list[Listing]:
    return [
        _listing("Rua Vicente da Costa, 100, Ipiranga", "8500.00"),
        _listing("Rua Moreira e Costa, 200, Ipiranga", "9500.00"),
        _listing("Rua Vicente da Costa, 300, Ipiranga", "10500.00"),
        _listing("Rua Bom Pastor, 400, Ipiranga", "11000.00"),
    ]


class TestPriceRangeFilter:
    def test_keeps_only_prices_in_range(self, listings: list[Listing]) -> None:
        result = PriceRangeFilter(9000, Decimal("9999.99")).apply(listings)
        assert [item.price for item in result] == [Decimal("9500.00")]

    def test_bounds_are_inclusive(self, listings: list[Listing]) -> None:
        result = PriceRangeFilter("8500.00", "10500.00").apply(listings)
        assert [item.price for item in result] == [
            Decimal("8500.00"),
            Decimal("9500.00"),
            Decimal("10500.00"),
        ]

    def test_preserves_input_order(self, listings: list[Listing]) -> None:
        reversed_input = list(reversed(listings))
        result = PriceRangeFilter(8000, 12000).apply(reversed_input)
        assert result == reversed_input

    def test_does_not_mutate_input(self, listings: list[Listing]) -> None:
        original = list(listings)
        PriceRangeFilter(9000, 9999).apply(listings)
        assert listings == original

    def test_empty_input(self) -> None:
        assert PriceRangeFilter(1, 2).apply([]) == []

    def test_description_embeds_bounds(self) -> None:
        description = PriceRangeFilter(9000, "9999.99").description
        assert "9000.00" in description
        assert "9999.99" in description


class TestAddressFilter:
    def test_matches_substring(self, listings: list[Listing]) -> None:
        result = AddressFilter("Vicente da Costa").apply(listings)
        assert [item.address for item in result] == [
            "Rua Vicente da Costa, 100, Ipiranga",
            "Rua Vicente da Costa, 300, Ipiranga",
        ]

    def test_is_case_sensitive(self, listings: list[Listing]) -> None:
        assert AddressFilter("vicente da costa").apply(listings) == []

    def test_description_embeds_substring(self) -> None:
        assert "Bom Pastor" in AddressFilter("Bom Pastor").description


class TestCompositeFilterAnd:
    def test_narrows_by_every_filter(self, listings: list[Listing]) -> None:
        composite = CompositeFilter(
            FilterOperator.AND,
            [AddressFilter("Vicente"), PriceRangeFilter(10000, 11000)],
        )
        result = composite.apply(listings)
        assert [item.address for item in result] == ["Rua Vicente da Costa, 300, Ipiranga"]

    def test_equivalent_to_chained_application(self, listings: list[Listing]) -> None:
        first = AddressFilter("Costa")
        second = PriceRangeFilter(9000, 11000)
        composite = CompositeFilter.all_of(first, second)
        assert composite.apply(listings) == first.apply(second.apply(listings))

    def test_stops_once_empty(self, listings: list[Listing]) -> None:
        class ExplodingFilter(AddressFilter):
            def apply(self, listings):  # type: ignore[no-untyped-def]
                if not listings:
                    raise AssertionError("should not be applied to an empty set")
                return super().apply(listings)

        composite = CompositeFilter.all_of(AddressFilter("Nowhere"), ExplodingFilter("Rua"))
        assert composite.apply(listings) == []


class TestCompositeFilterOr:
    def test_union_in_input_order(self, listings: list[Listing]) -> None:
        composite = CompositeFilter(
            FilterOperator.OR,
            [PriceRangeFilter(11000, 11000), AddressFilter("Moreira")],
        )
        result = composite.apply(listings)
        assert result == [listings[1], listings[3]]

    def test_overlapping_matches_not_duplicated(self, listings: list[Listing]) -> None:
        composite = CompositeFilter.any_of(AddressFilter("Vicente"), PriceRangeFilter(8000, 9000))
        result = composite.apply(listings)
        assert result == [listings[0], listings[2]]

    def test_sub_filters_see_original_input(self, listings: list[Listing]) -> None:
        composite = CompositeFilter.any_of(AddressFilter("Bom Pastor"), AddressFilter("Moreira"))
        assert composite.apply(listings) == [listings[1], listings[3]]

    def test_no_matches(self, listings: list[Listing]) -> None:
        composite = CompositeFilter.any_of(AddressFilter("X"), PriceRangeFilter(1, 2))
        assert composite.apply(listings) == []


class TestCompositeFilterEdgeCases:
    @pytest.mark.parametrize("operator", list(FilterOperator))
    def test_no_sub_filters_is_identity(
        self, operator: FilterOperator, listings: list[Listing]
    ) -> None:
        result = CompositeFilter(operator, []).apply(listings)
        assert result == listings
        assert result is not listings

    def test_nested_composites(self, listings: list[Listing]) -> None:
        inner = CompositeFilter.any_of(AddressFilter("Moreira"), AddressFilter("Bom Pastor"))
        outer = CompositeFilter.all_of(inner, PriceRangeFilter(9000, 10000))
        assert outer.apply(listings) == [listings[1]]

    def test_description_renders_operators(self) -> None:
        and_filter = CompositeFilter.all_of(AddressFilter("A"), AddressFilter("B"))
        or_filter = CompositeFilter.any_of(AddressFilter("C"), and_filter)
        assert " AND " in and_filter.description
        assert " OR " in or_filter.description
        assert or_filter.description.startswith("(")

    def test_operator_given_as_text(self, listings: list[Listing]) -> None:
        sub_filters = [AddressFilter("Vicente"), PriceRangeFilter(8000, 9000)]
        and_filter = CompositeFilter("AND", sub_filters)
        or_filter = CompositeFilter("OR", sub_filters)
        assert and_filter.operator is FilterOperator.AND
        assert and_filter.apply(listings) == [listings[0]]
        assert or_filter.apply(listings) == [listings[0], listings[2]]
        assert " AND " in and_filter.description

    @pytest.mark.parametrize("operator", ["XOR", "and", ""])
    def test_unknown_operator_raises(self, operator: str) -> None:
        with pytest.raises(ValueError):
            CompositeFilter(operator, [AddressFilter("A")])
