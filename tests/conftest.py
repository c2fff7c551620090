"""Shared fixtures for urlpat tests."""

from __future__ import annotations

import pytest

from urlpat import PatternTable, Route, UrlPattern


@pytest.fixture
def table() -> PatternTable:
    """A small table where order matters: ``me`` shadows ``user``."""
    return PatternTable(
        routes=(
            Route("me", UrlPattern.parse("/users/me")),
            Route("user", UrlPattern.parse("/users/:id")),
            Route("search", UrlPattern.parse("/search?:q=&:page")),
        )
    )
