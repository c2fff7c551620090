"""Core value types shared by the matcher and the inflator.

A capture token is a path segment or query-item name carrying the ``:``
prefix. The token itself (prefix included) is the key in a ParameterMap.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

CAPTURE_PREFIX = ":"

# token (prefix included) -> captured or supplied value
ParameterMap: TypeAlias = dict[str, str]


@dataclass(frozen=True, slots=True)
class QueryItem:
    """A single ``name[=value]`` pair from a query string.

    ``value`` is None when the item has no ``=`` at all. In a pattern that
    marks an optional capture; ``value=""`` marks a required one.
    """

    name: str
    value: str | None = None

    def __str__(self) -> str:
        if self.value is None:
            return self.name
        return f"{self.name}={self.value}"

    @property
    def is_capture(self) -> bool:
        return is_capture_token(self.name)

    @property
    def is_required(self) -> bool:
        """Only meaningful for capture items: a value in the pattern means required."""
        return self.value is not None


def is_capture_token(text: str) -> bool:
    return text.startswith(CAPTURE_PREFIX)


def unprefixed(token: str) -> str:
    """Strip the capture prefix from a token."""
    return token[len(CAPTURE_PREFIX) :]
