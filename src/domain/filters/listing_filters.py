"""
Composable listing filters.

Every filter is a pure function over a sequence of listings: the result is a
new list holding a subsequence of the input, in input order.
"""
from abc import ABC, abstractmethod
from collections.abc import Sequence
from decimal import Decimal

from src.domain.entities.listing import Listing, to_price
from src.domain.enums.filter_operator import FilterOperator


class ListingFilter(ABC):
    """Predicate narrowing a listing collection."""

    @abstractmethod
    def apply(self, listings: Sequence[Listing]) -> list[Listing]:
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable summary used for audit logging."""
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.description}>"


class PriceRangeFilter(ListingFilter):
    """Keeps listings whose price lies in the closed interval [min_price, max_price]."""

    def __init__(
        self,
        min_price: Decimal | int | float | str,
        max_price: Decimal | int | float | str,
    ) -> None:
        self.min_price = to_price(min_price)
        self.max_price = to_price(max_price)

    def apply(self, listings: Sequence[Listing]) -> list[Listing]:
        return [
            listing
            for listing in listings
            if self.min_price <= listing.price <= self.max_price
        ]

    @property
    def description(self) -> str:
        return f"Price between R$ {self.min_price:.2f} and R$ {self.max_price:.2f}"


class AddressFilter(ListingFilter):
    """Keeps listings whose address contains the given text (case-sensitive)."""

    def __init__(self, substring: str) -> None:
        self.substring = substring

    def apply(self, listings: Sequence[Listing]) -> list[Listing]:
        return [listing for listing in listings if self.substring in listing.address]

    @property
    def description(self) -> str:
        return f"Address contains: {self.substring}"


class CompositeFilter(ListingFilter):
    """
    Combines sub-filters with AND or OR semantics.

    AND narrows the working set filter by filter, left to right. OR applies
    every sub-filter to the original input and keeps each listing matched by
    at least one of them, once, in input order. With no sub-filters the input
    passes through unchanged.
    """

    def __init__(
        self, operator: FilterOperator | str, filters: Sequence[ListingFilter]
    ) -> None:
        # Raises ValueError for tokens other than AND/OR.
        self.operator = FilterOperator(operator)
        self.filters: tuple[ListingFilter, ...] = tuple(filters)

    @classmethod
    def all_of(cls, *filters: ListingFilter) -> "CompositeFilter":
        return cls(FilterOperator.AND, filters)

    @classmethod
    def any_of(cls, *filters: ListingFilter) -> "CompositeFilter":
        return cls(FilterOperator.OR, filters)

    def apply(self, listings: Sequence[Listing]) -> list[Listing]:
        if not self.filters:
            return list(listings)
        if self.operator is FilterOperator.AND:
            return self._apply_and(listings)
        return self._apply_or(listings)

    def _apply_and(self, listings: Sequence[Listing]) -> list[Listing]:
        result = list(listings)
        for listing_filter in self.filters:
            if not result:
                break
            result = listing_filter.apply(result)
        return result

    def _apply_or(self, listings: Sequence[Listing]) -> list[Listing]:
        # Membership by identity: sub-filter output only ever holds input objects.
        matched: set[int] = set()
        for listing_filter in self.filters:
            matched.update(id(listing) for listing in listing_filter.apply(listings))
        return [listing for listing in listings if id(listing) in matched]

    @property
    def description(self) -> str:
        joined = f" {self.operator.value} ".join(f.description for f in self.filters)
        return f"({joined})"
