"""Page/limit normalization shared by every paginated operation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Final

DEFAULT_PAGE: Final[int] = 1
DEFAULT_LIMIT: Final[int] = 10
# LIMIT and OFFSET are bound as signed 64-bit integers by every supported backend.
MAX_ROWS: Final[int] = 2**63 - 1


def _coerce_positive(raw: object, default: int) -> int:
    """Return ``raw`` as a positive integer, or ``default`` when it is unusable."""
    if raw is None or isinstance(raw, bool):
        return default
    if isinstance(raw, int):
        value = raw
    else:
        try:
            value = int(str(raw).strip())
        except ValueError:
            return default
    return value if 1 <= value <= MAX_ROWS else default


@dataclass(frozen=True)
class Pagination:
    """One-based page number and positive page size."""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_params(
        cls,
        page: object = None,
        limit: object = None,
        *,
        default_page: int = DEFAULT_PAGE,
        default_limit: int = DEFAULT_LIMIT,
    ) -> Pagination:
        """Build a pagination from raw query values.

        Absent, non-integer, non-positive or out-of-range values fall back to
        the defaults independently of each other. A page whose offset would
        not fit in a storage integer also falls back. This never raises.
        """
        limit_value = _coerce_positive(limit, default_limit)
        page_value = _coerce_positive(page, default_page)
        if (page_value - 1) * limit_value > MAX_ROWS:
            page_value = default_page
        return cls(page=page_value, limit=limit_value)

    @property
    def skip(self) -> int:
        """Number of matching rows preceding this page."""
        return (self.page - 1) * self.limit
