"""Tagged result variants for operations that can fail.

Public operations return ``Ok(value)`` or ``Err(error)`` instead of a
success flag paired with a nullable value. ``Err`` always carries the
typed exception describing the failure, so a caller can log it or
re-raise it without losing the original cause.

Example:
    >>> result = await resolver.resolve("owner", "repo", False, "v1.0")
    >>> if isinstance(result, Err):
    ...     print(result.error.kind)
    ... else:
    ...     print(result.value.tag_name)

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from download_github_release.exceptions import DownloadReleaseError

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class Ok(Generic[T]):
    """Successful result holding a value."""

    value: T

    def is_ok(self) -> bool:
        """Return True; this is the success variant."""
        return True


@dataclass(slots=True, frozen=True)
class Err:
    """Failed result holding the typed error."""

    error: DownloadReleaseError

    def is_ok(self) -> bool:
        """Return False; this is the failure variant."""
        return False


Result = Ok[T] | Err
