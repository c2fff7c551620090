"""inflate() — fill a pattern's capture tokens with parameter values.

The structural inverse of match(): path tokens and required query tokens
must be supplied, optional query tokens are dropped when not supplied,
literals pass through. Scalar components are copied from the pattern.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from urlpat._errors import MissingParameterError
from urlpat._types import QueryItem, is_capture_token, unprefixed
from urlpat._url import as_url

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from urlpat._url import Url


def inflate(pattern: Url | str, params: Mapping[str, str]) -> Url:
    """Substitute ``params`` into ``pattern``.

    Keys of ``params`` are capture tokens (``:`` included). Keys the pattern
    does not declare are ignored.

    Raises:
        MissingParameterError: A path token or required query token has no value.
        InvalidUrlError: The pattern cannot be parsed or the filled URL cannot
            be recomposed.
    """
    pattern_url = as_url(pattern)

    query_items = pattern_url.query_items
    if query_items is not None:
        query_items = inflate_query(query_items, params)

    url = pattern_url.replace(
        path_segments=inflate_path(pattern_url.path_segments, params),
        query_items=query_items,
    )
    # Recompose once so a structurally impossible result fails here.
    url.to_string()
    return url


def inflate_path(segments: Iterable[str], params: Mapping[str, str]) -> tuple[str, ...]:
    filled: list[str] = []
    for segment in segments:
        if not is_capture_token(segment):
            filled.append(segment)
        elif segment in params:
            filled.append(params[segment])
        else:
            raise MissingParameterError(segment)
    return tuple(filled)


def inflate_query(
    items: Iterable[QueryItem], params: Mapping[str, str]
) -> tuple[QueryItem, ...]:
    filled: list[QueryItem] = []
    for item in items:
        if not item.is_capture:
            filled.append(item)
        elif item.name in params:
            filled.append(QueryItem(unprefixed(item.name), params[item.name]))
        elif item.is_required:
            raise MissingParameterError(item.name)
    return tuple(filled)
