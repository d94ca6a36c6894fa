"""Helpers for normalizing authored site paths and expanding them again.

Authors write the same route in several forms: bare (``/guide/``), prefixed
with the site base path (``/project/en/guide/``), or, under hash routing,
behind a ``#`` route marker (``/project/#/en/guide/``). The functions here
collapse all of them to a :class:`LocalPath`, a locale-relative path without a
leading slash, and expand a :class:`LocalPath` back to exactly one absolute
form.

Examples
--------
>>> strip_base_path("/proj/guide/", "/proj/")
'guide/'
>>> expand_path("/proj/", "/en/", "guide/", RoutingMode.PATH)
'/proj/en/guide/'
>>> expand_path("/proj/", "/en/", "guide/", RoutingMode.HASH)
'/proj/#/en/guide/'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from navconf._constants import EXTERNAL_SCHEMES, HASH_MARKER, ROOT_LOCALE
from navconf.config.models import ConfigError, ConfigErrorKind, RoutingMode

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@dc.dataclass(frozen=True, slots=True)
class LocalPath:
    """A canonical path relative to a locale root.

    ``locale`` is ``None`` when the path belongs to whichever locale's table
    contains it, so locale fallback can rewrite it under the inheriting
    locale. It holds a locale key when the path explicitly points into a
    different locale.
    """

    relative: str
    locale: str | None = None

    def owner(self, context: str) -> str:
        """Return the locale key this path resolves under within ``context``."""
        return self.locale if self.locale is not None else context


def is_external(link: str) -> bool:
    """Return whether ``link`` is an absolute ``http(s)`` URL."""
    return link.lower().startswith(EXTERNAL_SCHEMES)


def normalize_base_path(value: object) -> str:
    """Return the canonical base path: ``''`` for the root, else ``/x/``."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ConfigError(
            ConfigErrorKind.MALFORMED_PATH, repr(value), "base path must be a string"
        )
    text = value.strip()
    if text in ("", "/"):
        return ""
    if is_external(text) or not text.startswith("/"):
        raise ConfigError(
            ConfigErrorKind.MALFORMED_PATH,
            text,
            "base path must start with '/'",
        )
    return text if text.endswith("/") else f"{text}/"


def strip_base_path(path: str, base_path: str) -> str:
    """Remove a leading ``base_path`` and return the path without a leading slash.

    Paths that do not carry the base prefix are treated as bare paths.

    Examples
    --------
    >>> strip_base_path("/proj/", "/proj/")
    ''
    >>> strip_base_path("/proj", "/proj/")
    ''
    >>> strip_base_path("/guide/", "/proj/")
    'guide/'
    """
    if base_path:
        if path.startswith(base_path):
            return path[len(base_path) :]
        if path == base_path[:-1]:
            return ""
    return path[1:]


def strip_hash_marker(relative: str) -> str:
    """Remove a leading ``#`` route marker from a base-relative path."""
    if relative == HASH_MARKER:
        return ""
    if relative.startswith(f"{HASH_MARKER}/"):
        return relative[2:]
    return relative


def match_locale(relative: str, locale_keys: cabc.Iterable[str]) -> tuple[str, str] | None:
    """Return ``(key, remainder)`` for the longest non-root key prefixing ``relative``."""
    best: tuple[str, str] | None = None
    for key in locale_keys:
        if key == ROOT_LOCALE:
            continue
        segment = key[1:]
        if relative.startswith(segment):
            remainder = relative[len(segment) :]
        elif relative == segment[:-1]:
            remainder = ""
        else:
            continue
        if best is None or len(key) > len(best[0]):
            best = (key, remainder)
    return best


def normalize_locale_key(
    value: object, base_path: str, routing_mode: RoutingMode = RoutingMode.PATH
) -> str:
    """Return the canonical form of a locale key such as ``/zh/``.

    Keys may be authored the way links are: base-prefixed, and under hash
    routing behind the ``#`` route marker (``/proj/#/zh/``).
    """
    if not isinstance(value, str) or not value.startswith("/"):
        raise ConfigError(
            ConfigErrorKind.MALFORMED_PATH,
            str(value),
            "locale keys must start with '/'",
        )
    relative = strip_base_path(value, base_path)
    if routing_mode is RoutingMode.HASH:
        relative = strip_hash_marker(relative)
    if not relative:
        return ROOT_LOCALE
    return f"/{relative}" if relative.endswith("/") else f"/{relative}/"


@dc.dataclass(frozen=True, slots=True)
class PathNormalizer:
    """Normalize authored paths for one site's base path and locale table."""

    base_path: str
    routing_mode: RoutingMode
    locale_keys: tuple[str, ...]

    def normalize(self, path: object, *, context: str, field: str) -> LocalPath:
        """Collapse an internal path authored in ``context`` to a LocalPath.

        Parameters
        ----------
        path : object
            The authored value.
        context : str
            Key of the locale whose table contains the value.
        field : str
            Human-readable field name used in error messages.

        Raises
        ------
        ConfigError
            ``MalformedPath`` when the value is empty, not a string, lacks a
            leading ``/``, or is an external URL.
        """
        if not isinstance(path, str) or not path.strip():
            raise ConfigError(
                ConfigErrorKind.MALFORMED_PATH, repr(path), f"{field} must not be empty"
            )
        text = path.strip()
        if is_external(text):
            raise ConfigError(
                ConfigErrorKind.MALFORMED_PATH,
                text,
                f"{field} must be an internal path, not an external URL",
            )
        if not text.startswith("/"):
            raise ConfigError(
                ConfigErrorKind.MALFORMED_PATH, text, f"{field} must start with '/'"
            )
        relative = strip_base_path(text, self.base_path)
        if self.routing_mode is RoutingMode.HASH:
            relative = strip_hash_marker(relative)
        matched = match_locale(relative, self.locale_keys)
        if matched is None:
            # A bare path under one locale may still land inside a nested one.
            matched = match_locale(f"{context[1:]}{relative}", self.locale_keys)
        owner, relative = matched if matched is not None else (context, relative)
        if owner == context:
            return LocalPath(relative)
        return LocalPath(relative, owner)

    def expand(self, local: LocalPath, context: str) -> str:
        """Return the single absolute form of ``local`` within ``context``."""
        return expand_path(
            self.base_path, local.owner(context), local.relative, self.routing_mode
        )


def expand_path(
    base_path: str, locale_key: str, relative: str, routing_mode: RoutingMode
) -> str:
    """Join base path, locale key, and a relative path into one absolute path."""
    prefix = base_path.rstrip("/")
    if routing_mode is RoutingMode.HASH:
        prefix = f"{prefix}/{HASH_MARKER}"
    return f"{prefix}{locale_key}{relative}"


__all__ = [
    "LocalPath",
    "PathNormalizer",
    "expand_path",
    "is_external",
    "match_locale",
    "normalize_base_path",
    "normalize_locale_key",
    "strip_base_path",
    "strip_hash_marker",
]
