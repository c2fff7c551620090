"""Error taxonomy for matching and inflation.

Match failures derive from MatchError, inflate failures from InflateError.
InvalidUrlError can surface from either side, so it derives from both.
Every error carries its structured payload as attributes; the message is
for humans only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from urlpat._types import QueryItem


class UrlPatternError(Exception):
    """Base class for every error raised by urlpat."""


# ═══════════════════════════════════════════════════════════════════════════════
# Match errors
# ═══════════════════════════════════════════════════════════════════════════════


class MatchError(UrlPatternError):
    """The candidate does not satisfy the pattern."""


class ComponentMismatchError(MatchError):
    """A scalar component present in the pattern differs in the candidate."""

    def __init__(self, field: str, expected: object, actual: object) -> None:
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(f"{field} does not match: expected {expected!r}, got {actual!r}")


class PathMismatchError(MatchError):
    """The filled pattern path disagrees with the candidate path."""

    def __init__(
        self,
        expected: tuple[str, ...],
        actual: tuple[str, ...],
        msg: str | None = None,
    ) -> None:
        self.expected = expected
        self.actual = actual
        if msg is None:
            msg = f"path does not match: expected {list(expected)}, got {list(actual)}"
        super().__init__(msg)


class PathLengthMismatchError(PathMismatchError):
    """Pattern and candidate have a different number of path segments."""

    def __init__(self, expected: tuple[str, ...], actual: tuple[str, ...]) -> None:
        msg = (
            f"path length does not match: pattern has {len(expected)} segments, "
            f"candidate has {len(actual)}"
        )
        super().__init__(expected, actual, msg)


class DuplicateParameterError(MatchError):
    """Two capture sites in one pattern bind the same token."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"duplicate parameter in pattern: {token!r}")


class MissingQueryItemsError(MatchError):
    """Query constraints of the pattern left unsatisfied by the candidate.

    Reports the whole unsatisfied set at once.
    """

    def __init__(self, items: Iterable[QueryItem]) -> None:
        ordered = tuple(dict.fromkeys(items))
        self.items = frozenset(ordered)
        listed = ", ".join(repr(str(item)) for item in ordered)
        super().__init__(f"missing query items: {listed}")


# ═══════════════════════════════════════════════════════════════════════════════
# Inflate errors
# ═══════════════════════════════════════════════════════════════════════════════


class InflateError(UrlPatternError):
    """The pattern could not be filled with the supplied parameters."""


class MissingParameterError(InflateError):
    """A required capture token has no value in the parameter map."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"missing parameter: {token!r}")


# ═══════════════════════════════════════════════════════════════════════════════
# Shared
# ═══════════════════════════════════════════════════════════════════════════════


class InvalidUrlError(MatchError, InflateError):
    """A URL could not be decomposed or recomposed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"invalid URL: {reason}")


class UrlTooLongError(InvalidUrlError):
    """URL text exceeds the length limit."""

    def __init__(self, length: int, max_: int) -> None:
        self.length = length
        self.max = max_
        super().__init__(f"URL length {length} exceeds maximum {max_}")
