from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:  # pragma: no cover
    from formgrid.domain.schemas.result_data import ExtractionResult, PageAttempt


class ExtractionError(Exception):
    """Base class for all extraction failures."""


class LayoutMismatchError(ExtractionError):
    """Page line structure does not match the expected form layout."""


class InsufficientFieldsError(ExtractionError):
    """Page matched the layout but populated too few regions."""

    def __init__(self, page: int, field_count: int, min_fields: int) -> None:
        super().__init__(f"page {page}: {field_count} field(s) populated, need at least {min_fields}")
        self.page = page
        self.field_count = field_count
        self.min_fields = min_fields


class NoValidPageError(ExtractionError):
    """No page of the document produced a valid result.

    Carries the last evaluated page's result for diagnostics.
    """

    def __init__(
        self,
        message: str,
        result: Optional["ExtractionResult"] = None,
        attempts: Optional[List["PageAttempt"]] = None,
    ) -> None:
        super().__init__(message)
        self.result = result
        self.attempts = attempts or []


class DocumentDecodeError(ExtractionError):
    """Input document could not be decoded into pages."""


class UnknownLayoutError(ExtractionError):
    """Requested layout configuration is not registered."""


class DocumentFetchError(DocumentDecodeError):
    """Document URL could not be downloaded."""
