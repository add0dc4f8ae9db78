"""Page value object for paginated reads."""

from dataclasses import dataclass, field
from math import ceil
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, kw_only=True)
class Page(Generic[T]):
    """One page of an ordered result set.

    Attributes:
        items: Items on this page (at most page_size).
        total_count: Number of matching items across all pages.
        page_number: 1-based page index.
        page_size: Requested page size.

    Example:
        >>> page = Page(items=[1, 2], total_count=25, page_number=1, page_size=10)
        >>> page.total_pages
        3
    """

    items: list[T] = field(default_factory=list)
    total_count: int
    page_number: int
    page_size: int

    @property
    def total_pages(self) -> int:
        """Number of pages needed to cover total_count."""
        if self.total_count == 0:
            return 0
        return ceil(self.total_count / self.page_size)

    @property
    def has_next(self) -> bool:
        """Whether a later page exists."""
        return self.page_number < self.total_pages

    @property
    def has_previous(self) -> bool:
        """Whether an earlier page exists."""
        return self.page_number > 1
