"""Paging Schemas — request bounds and response envelope for paginated listings.

Invariants:
    - PageRequest.page_index >= 1; 1 <= page_size <= Settings.max_page_size
    - PagedListResponse mirrors PagedList exactly; derived flags are copied, never recomputed

Design Decisions:
    - page_size default read from Settings at validation time, so env overrides apply
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field, model_validator

from vernacular.config import get_settings
from vernacular.core.domain_types import FIRST_PAGE
from vernacular.core.paging import PagedList

T = TypeVar("T")


class PageRequest(BaseModel):
    """Which page a caller wants — validated before any query runs."""
    page_index: int = Field(FIRST_PAGE, ge=FIRST_PAGE)
    page_size: int = Field(
        default_factory=lambda: get_settings().default_page_size, ge=1,
    )

    @model_validator(mode="after")
    def check_max_page_size(self) -> "PageRequest":
        max_page_size = get_settings().max_page_size
        if self.page_size > max_page_size:
            raise ValueError(f"page_size cannot exceed {max_page_size}")
        return self

    def slice_bounds(self) -> tuple[int, int]:
        """Offsets (start, stop) of this page in the full ordered result."""
        start = (self.page_index - 1) * self.page_size
        return start, start + self.page_size


class PagedListResponse(BaseModel, Generic[T]):
    """One page of a listing, as sent to clients."""
    page_index: int
    page_size: int
    total_count: int
    total_pages: int
    has_previous_page: bool
    has_next_page: bool
    items: list[T]

    @classmethod
    def from_paged_list(cls, page: PagedList) -> "PagedListResponse":
        return cls(
            page_index=page.page_index,
            page_size=page.page_size,
            total_count=page.total_count,
            total_pages=page.total_pages,
            has_previous_page=page.has_previous_page,
            has_next_page=page.has_next_page,
            items=list(page.items),
        )
