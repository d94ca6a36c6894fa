"""Resolve locale-aware navigation for VuePress-style documentation sites.

This package turns a hand-authored site configuration, whose paths may be
bare, base-prefixed, or hash-routed, into one canonical navigation model
that a static-site renderer can use without further prefixing.

Exports
-------
- ``resolve``: Pure function turning a raw document into a ``SiteConfig``.
- ``ConfigError``: Raised when a document cannot be resolved.
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from navconf import resolve
>>> site = resolve({"locales": {"/": {}, "/zh/": {}}})
>>> [locale.prefix for locale in site.locales]
['/', '/zh/']
"""

from __future__ import annotations

from .cli import app, main
from .config import ConfigError, ConfigErrorKind, SiteConfig
from .resolver import resolve

__all__ = ["ConfigError", "ConfigErrorKind", "SiteConfig", "app", "main", "resolve"]
