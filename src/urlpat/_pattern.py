"""UrlPattern — a pattern parsed once and reused for many match/inflate calls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from urlpat._errors import DuplicateParameterError, MatchError
from urlpat._inflate import inflate
from urlpat._match import match
from urlpat._types import is_capture_token
from urlpat._url import Url, as_url

if TYPE_CHECKING:
    from collections.abc import Mapping

    from urlpat._types import ParameterMap


@dataclass(frozen=True, slots=True)
class UrlPattern:
    """A compiled URL pattern.

    >>> p = UrlPattern.parse("https://example.com/users/:id?:tab")
    >>> p.match("https://example.com/users/42?tab=posts")
    {':id': '42', ':tab': 'posts'}
    >>> str(p.inflate({":id": "7", ":tab": "likes"}))
    'https://example.com/users/7?tab=likes'
    """

    url: Url

    @classmethod
    def parse(cls, text: str) -> UrlPattern:
        return cls(Url.parse(text))

    @property
    def captures(self) -> tuple[str, ...]:
        """Every capture token, path first, in pattern order."""
        path = [s for s in self.url.path_segments if is_capture_token(s)]
        query = [i.name for i in self.url.query_items or () if i.is_capture]
        return tuple(path + query)

    @property
    def required_captures(self) -> tuple[str, ...]:
        """Tokens inflate() cannot do without: path tokens and query tokens with a value."""
        path = [s for s in self.url.path_segments if is_capture_token(s)]
        query = [i.name for i in self.url.query_items or () if i.is_capture and i.is_required]
        return tuple(path + query)

    @property
    def optional_captures(self) -> tuple[str, ...]:
        return tuple(
            i.name for i in self.url.query_items or () if i.is_capture and not i.is_required
        )

    def match(self, candidate: Url | str) -> ParameterMap:
        return match(self.url, candidate)

    def matches(self, candidate: Url | str) -> bool:
        """Boolean form of match().

        DuplicateParameterError is a defect in the pattern, not a miss,
        so it still propagates.
        """
        try:
            self.match(candidate)
        except DuplicateParameterError:
            raise
        except MatchError:
            return False
        return True

    def inflate(self, params: Mapping[str, str]) -> Url:
        return inflate(self.url, params)

    def __str__(self) -> str:
        return str(self.url)


def as_pattern(value: UrlPattern | Url | str) -> UrlPattern:
    if isinstance(value, UrlPattern):
        return value
    return UrlPattern(as_url(value))
