"""Site configuration model and on-disk loading for navconf.

This subpackage defines the immutable dataclasses (:class:`SiteConfig`,
:class:`LocaleConfig`, :class:`NavLink`, etc.) that describe a resolved
documentation-site navigation model, the :class:`ConfigError` raised when a
document cannot be resolved, and the loader that reads raw YAML, TOML, or
JSON documents. The primary entry point is :func:`load_site_config`, which
reads a file and hands it to :func:`navconf.resolver.resolve`.

Examples
--------
>>> from pathlib import Path
>>> from navconf.config import load_site_config
>>> site = load_site_config(Path("docs/.vuepress/config.yaml"))  # doctest: +SKIP
>>> site.get_locale("/zh/").nav[0].link  # doctest: +SKIP
'/project/zh/'
"""

from .models import (
    ConfigError,
    ConfigErrorKind,
    LocaleConfig,
    LocaleLabels,
    NavLink,
    RoutingMode,
    SidebarGroup,
    SidebarSection,
    SiteConfig,
)
from .loader import load_raw_document, load_site_config

__all__ = [
    "ConfigError",
    "ConfigErrorKind",
    "LocaleConfig",
    "LocaleLabels",
    "NavLink",
    "RoutingMode",
    "SidebarGroup",
    "SidebarSection",
    "SiteConfig",
    "load_raw_document",
    "load_site_config",
]
