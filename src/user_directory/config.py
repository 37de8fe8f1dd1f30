"""Search configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_PAGE_SIZE = 100
MAX_PAGE_SIZE = 1000


class SearchSettings(BaseModel):
    """Pagination limits for searches.

    Attributes:
        default_page_size: Size used when the caller does not ask for one.
        max_page_size: Largest size a page request may carry.
    """

    model_config = ConfigDict(frozen=True)

    default_page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)
    max_page_size: int = Field(default=MAX_PAGE_SIZE, ge=1)

    @model_validator(mode="after")
    def _default_within_max(self) -> SearchSettings:
        if self.default_page_size > self.max_page_size:
            raise ValueError(
                f"default_page_size ({self.default_page_size}) exceeds "
                f"max_page_size ({self.max_page_size})"
            )
        return self
