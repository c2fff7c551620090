"""match() — test a candidate URL against a pattern and capture parameters.

Evaluation order:
1. Scalar components (scheme, host, user, password, port, fragment):
   only those present in the pattern; first mismatch wins.
2. Path: equal length, capture tokens bound positionally, then the filled
   pattern must equal the candidate.
3. Query: pattern items are a subset constraint over candidate items.
   Unsatisfied items are collected and reported together.

Captures from path and query land in one ParameterMap. A token bound twice
anywhere in the pattern is a DuplicateParameterError.
"""

from __future__ import annotations

import logging
from operator import attrgetter
from typing import TYPE_CHECKING

from urlpat._errors import (
    ComponentMismatchError,
    DuplicateParameterError,
    MissingQueryItemsError,
    PathLengthMismatchError,
    PathMismatchError,
)
from urlpat._types import QueryItem, is_capture_token, unprefixed
from urlpat._url import as_url

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from urlpat._types import ParameterMap
    from urlpat._url import Url

logger = logging.getLogger(__name__)

# Checked in this order; the first mismatch is the one reported.
COMPONENT_FIELDS: tuple[tuple[str, Callable[[Url], object]], ...] = tuple(
    (name, attrgetter(name))
    for name in ("scheme", "host", "user", "password", "port", "fragment")
)


def match(pattern: Url | str, candidate: Url | str) -> ParameterMap:
    """Match ``candidate`` against ``pattern``.

    Returns the captured parameters, keyed by capture token (``:`` included).

    Raises:
        ComponentMismatchError: A scalar component present in the pattern differs.
        PathLengthMismatchError: Segment counts differ.
        PathMismatchError: A literal segment differs.
        DuplicateParameterError: A capture token is bound more than once.
        MissingQueryItemsError: Query constraints are unsatisfied.
        InvalidUrlError: Either URL string cannot be parsed.
    """
    pattern_url = as_url(pattern)
    candidate_url = as_url(candidate)

    match_components(pattern_url, candidate_url)
    params = match_path(pattern_url.path_segments, candidate_url.path_segments)
    query_params = match_query(pattern_url.query_items or (), candidate_url.query_items or ())

    for token, value in query_params.items():
        _bind(params, token, value)
    return params


def match_components(pattern: Url, candidate: Url) -> None:
    """Compare the scalar components the pattern constrains.

    A component that is None in the pattern is unconstrained.
    """
    for name, get in COMPONENT_FIELDS:
        expected = get(pattern)
        if expected is None:
            continue
        actual = get(candidate)
        if actual != expected:
            logger.debug("component %s mismatch: %r != %r", name, expected, actual)
            raise ComponentMismatchError(name, expected, actual)


def match_path(
    pattern_segments: tuple[str, ...], candidate_segments: tuple[str, ...]
) -> ParameterMap:
    """Capture path parameters positionally."""
    if len(pattern_segments) != len(candidate_segments):
        raise PathLengthMismatchError(pattern_segments, candidate_segments)

    params: ParameterMap = {}
    for segment, value in zip(pattern_segments, candidate_segments, strict=True):
        if is_capture_token(segment):
            _bind(params, segment, value)

    filled = tuple(params.get(segment, segment) for segment in pattern_segments)
    if filled != candidate_segments:
        logger.debug("path mismatch: %r != %r", filled, candidate_segments)
        raise PathMismatchError(filled, candidate_segments)
    return params


def match_query(
    pattern_items: Iterable[QueryItem], candidate_items: Iterable[QueryItem]
) -> ParameterMap:
    """Capture query parameters and check the pattern items are satisfied.

    Literal pattern items must appear verbatim among the candidate items.
    Capture items look up the unprefixed name among candidate items that
    carry a value; the last such item wins. A capture item with a value in
    the pattern is required, one without is optional.
    """
    pattern_items = tuple(pattern_items)
    candidate_items = tuple(candidate_items)

    lookup = {item.name: item.value for item in candidate_items if item.value is not None}
    present = frozenset(candidate_items)

    params: ParameterMap = {}
    missing: list[QueryItem] = []
    for item in pattern_items:
        if not item.is_capture:
            if item not in present:
                missing.append(item)
            continue

        value = lookup.get(unprefixed(item.name))
        if value is not None:
            _bind(params, item.name, value)
        elif item.is_required:
            # Reported in pattern form even if the candidate carries ":a=" literally.
            missing.append(item)

    if missing:
        logger.debug("missing query items: %s", ", ".join(map(str, missing)))
        raise MissingQueryItemsError(missing)
    return params


def _bind(params: ParameterMap, token: str, value: str) -> None:
    """Insert a capture, refusing to overwrite an existing one."""
    if token in params:
        raise DuplicateParameterError(token)
    params[token] = value
