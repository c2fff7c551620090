"""Url — structural decomposition of a URL, backed by ``urllib.parse``.

Url.parse() splits a URL string into the components the matcher works with;
str(url) puts them back together. Path segments, query names/values and the
fragment are stored percent-decoded and re-encoded on output. ``:`` and ``@``
stay literal so capture tokens survive a round trip.

Presence is tracked separately from emptiness, mirroring the URL grammar:

| Text        | path_segments   | query_items                | fragment |
|-------------|-----------------|----------------------------|----------|
| ``a``       | ``("a",)``      | None                       | None     |
| ``/a/b``    | ``("", "a", "b")`` | None                    | None     |
| ``?``       | ``()``          | ``()``                     | None     |
| ``?q&r=``   | ``()``          | ``(q, r="")``              | None     |
| ``#``       | ``()``          | None                       | ``""``   |
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote, scheme_chars, unquote, urlsplit

from urlpat._errors import InvalidUrlError, UrlTooLongError
from urlpat._types import QueryItem

MAX_URL_LENGTH = 8192

_SEGMENT_SAFE = "!$&'()*+,;=:@"
_QUERY_SAFE = "!$'()*,;:@/?"
_FRAGMENT_SAFE = "!$&'()*+,;=:@/?"


@dataclass(frozen=True, slots=True)
class Url:
    """A URL split into the components used for matching and inflation.

    Every scalar component is None when the URL does not carry it.
    ``query_items`` is None when there is no ``?`` at all and an empty
    tuple for a bare ``?``.
    """

    scheme: str | None = None
    user: str | None = None
    password: str | None = None
    host: str | None = None
    port: int | None = None
    path_segments: tuple[str, ...] = ()
    query_items: tuple[QueryItem, ...] | None = None
    fragment: str | None = None

    @classmethod
    def parse(cls, text: str) -> Url:
        """Decompose a URL string.

        Raises:
            UrlTooLongError: If the text exceeds MAX_URL_LENGTH.
            InvalidUrlError: If urllib rejects the URL or its port.
        """
        if len(text) > MAX_URL_LENGTH:
            raise UrlTooLongError(len(text), MAX_URL_LENGTH)

        try:
            parts = urlsplit(text)
            port = parts.port
        except ValueError as e:
            raise InvalidUrlError(str(e)) from e

        head, hash_mark, _ = text.strip().partition("#")
        after_scheme = head[len(parts.scheme) + 1 :] if parts.scheme else head

        user = password = host = None
        if parts.netloc or after_scheme.startswith("//"):
            user, password, host = _split_netloc(parts.netloc)

        query_items = None
        if "?" in head:
            query_items = tuple(_parse_query_item(p) for p in parts.query.split("&") if p)

        return cls(
            scheme=parts.scheme or None,
            user=user,
            password=password,
            host=host,
            port=port,
            path_segments=tuple(unquote(s) for s in parts.path.split("/")) if parts.path else (),
            query_items=query_items,
            fragment=unquote(parts.fragment) if hash_mark else None,
        )

    @property
    def has_authority(self) -> bool:
        return self.host is not None or self.user is not None or self.port is not None

    @property
    def path(self) -> str:
        """Decoded path, segments joined with ``/``."""
        return "/".join(self.path_segments)

    def replace(self, **changes: Any) -> Url:
        """Return a copy with the given components replaced."""
        return dataclasses.replace(self, **changes)

    def to_string(self) -> str:
        """Recompose the URL.

        Raises:
            InvalidUrlError: If the components cannot form a URL that parses
                back to the same structure.
        """
        if self.path_segments == ("",):
            msg = "a path of one empty segment has no text form distinct from no path"
            raise InvalidUrlError(msg)
        path = "/".join(quote(s, safe=_SEGMENT_SAFE) for s in self.path_segments)
        out: list[str] = []

        if self.scheme is not None:
            out.append(f"{self.scheme}:")

        if self.has_authority:
            if path and not path.startswith("/"):
                msg = f"path {path!r} must be empty or start with '/' when an authority is present"
                raise InvalidUrlError(msg)
            out.append("//")
            out.append(self._userinfo())
            out.append(self.host or "")
            if self.port is not None:
                out.append(f":{self.port}")
        else:
            if path.startswith("//"):
                msg = f"path {path!r} cannot start with '//' without an authority"
                raise InvalidUrlError(msg)
            if self.scheme is None and self.path_segments and _reads_as_scheme(path):
                msg = f"first path segment of {path!r} would be read as a scheme"
                raise InvalidUrlError(msg)

        out.append(path)

        if self.query_items is not None:
            out.append("?")
            out.append("&".join(_format_query_item(item) for item in self.query_items))

        if self.fragment is not None:
            out.append("#")
            out.append(quote(self.fragment, safe=_FRAGMENT_SAFE))

        return "".join(out)

    def __str__(self) -> str:
        return self.to_string()

    def _userinfo(self) -> str:
        if self.user is None:
            return ""
        info = quote(self.user, safe="!$&'()*+,;=")
        if self.password is not None:
            info += ":" + quote(self.password, safe="!$&'()*+,;=:")
        return info + "@"


def as_url(value: Url | str) -> Url:
    """Accept either a parsed Url or URL text."""
    if isinstance(value, Url):
        return value
    return Url.parse(value)


def _split_netloc(netloc: str) -> tuple[str | None, str | None, str]:
    """Split ``user:password@host:port`` into (user, password, host).

    The port is validated and converted by urlsplit; only its presence is
    skipped here. Host case is preserved.
    """
    userinfo, at, hostport = netloc.rpartition("@")
    user = password = None
    if at:
        raw_user, colon, raw_password = userinfo.partition(":")
        user = unquote(raw_user)
        password = unquote(raw_password) if colon else None

    if hostport.startswith("["):
        host = hostport[: hostport.find("]") + 1]
    else:
        host = hostport.partition(":")[0]
    return user, password, host


def _parse_query_item(piece: str) -> QueryItem:
    name, eq, value = piece.partition("=")
    return QueryItem(unquote(name), unquote(value) if eq else None)


def _format_query_item(item: QueryItem) -> str:
    name = quote(item.name, safe=_QUERY_SAFE)
    if item.value is None:
        return name
    return f"{name}={quote(item.value, safe=_QUERY_SAFE)}"


def _reads_as_scheme(path: str) -> bool:
    """True when ``path`` would be taken for ``scheme:rest`` by a parser."""
    first = path.split("/", 1)[0]
    head, colon, _ = first.partition(":")
    return (
        bool(colon)
        and bool(head)
        and head[0].isascii()
        and head[0].isalpha()
        and all(c in scheme_chars for c in head)
    )
