from __future__ import annotations

import math
from dataclasses import dataclass

from car_dealer.domain.errors import ValidationError

CLASSIFIEDS_PER_PAGE = 3
MAX_PAGE_SIZE = 200
# Highest page whose offset still fits a signed 64-bit OFFSET at any page size
MAX_PAGE = (2**63 - 1) // MAX_PAGE_SIZE


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


def resolve_page(raw: str | None) -> int:
    """
    Resolve a raw ``page`` query value to a 1-based page index.

    Absent, non-numeric and non-finite values resolve to page 1. Numeric
    values are truncated toward zero, floored at 1 and capped at ``MAX_PAGE``,
    so "0", "-5" and "abc" all land on the first page and "1e19" lands past
    the last row instead of overflowing the database OFFSET.
    """
    if raw is None:
        return 1

    try:
        number = float(raw)
    except ValueError:
        return 1

    if not math.isfinite(number):
        return 1

    return min(max(int(number), 1), MAX_PAGE)


def page_count(total: int, page_size: int) -> int:
    """Number of pages needed to show ``total`` rows ``page_size`` at a time."""
    return math.ceil(total / page_size)


@dataclass(frozen=True, slots=True)
class Paging:
    page: int = 1
    page_size: int = CLASSIFIEDS_PER_PAGE

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.page < 1:
            raise PagingValidationError("page must be >= 1")
        if self.page > MAX_PAGE:
            raise PagingValidationError(f"page must be <= {MAX_PAGE}")
        if self.page_size <= 0:
            raise PagingValidationError("page_size must be > 0")
        if self.page_size > MAX_PAGE_SIZE:
            raise PagingValidationError(f"page_size must be <= {MAX_PAGE_SIZE}")
