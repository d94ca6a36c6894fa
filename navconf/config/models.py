"""Typed dataclasses describing a resolved documentation-site navigation model."""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

from navconf._constants import EXTERNAL_SCHEMES


class RoutingMode(enum.StrEnum):
    """How the renderer interprets resolved paths."""

    PATH = "path"
    HASH = "hash"


class ConfigErrorKind(enum.StrEnum):
    """Categories of failure reported by the resolver."""

    DUPLICATE_LOCALE_KEY = "DuplicateLocaleKey"
    AMBIGUOUS_DEFAULT_LOCALE = "AmbiguousDefaultLocale"
    ORPHAN_SIDEBAR = "OrphanSidebar"
    MALFORMED_PATH = "MalformedPath"
    INVALID_ENTRY = "InvalidEntry"


class ConfigError(ValueError):
    """Raised when a raw site configuration cannot be resolved.

    Attributes
    ----------
    kind : ConfigErrorKind
        The category of the failure.
    subject : str
        The offending locale key or path, quoted in the message so authors
        can find it in the source document.
    """

    def __init__(self, kind: ConfigErrorKind, subject: str, detail: str) -> None:
        self.kind = kind
        self.subject = subject
        self.detail = detail
        super().__init__(f"{kind}: {detail} ({subject!r})")


@dc.dataclass(frozen=True, slots=True)
class NavLink:
    """Top navigation entry, optionally carrying a dropdown of nested entries."""

    text: str
    link: str | None
    items: tuple[NavLink, ...] = ()

    @property
    def external(self) -> bool:
        """Return whether the link points outside the site."""
        return self.link is not None and self.link.lower().startswith(EXTERNAL_SCHEMES)

    def walk(self) -> typ.Iterator[NavLink]:
        """Yield this entry followed by every nested entry, depth first."""
        yield self
        for item in self.items:
            yield from item.walk()


@dc.dataclass(frozen=True, slots=True)
class SidebarGroup:
    """A titled group of pages within a sidebar section.

    ``children`` keeps the page slugs relative to the section path, ``''``
    being the section index. ``pages`` holds the same pages as absolute
    resolved paths, ready for the renderer.
    """

    title: str
    collapsable: bool
    children: tuple[str, ...]
    pages: tuple[str, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class SidebarSection:
    """Sidebar groups shown for every page under ``path``."""

    path: str
    groups: tuple[SidebarGroup, ...]


@dc.dataclass(frozen=True, slots=True)
class LocaleLabels:
    """Language-switcher strings shown by the theme for a locale."""

    label: str | None = None
    select_text: str | None = None
    aria_label: str | None = None
    edit_link_text: str | None = None
    last_updated: str | None = None


@dc.dataclass(frozen=True, slots=True)
class LocaleConfig:
    """A fully resolved per-language view of the site."""

    key: str
    prefix: str
    lang: str
    title: str
    description: str
    nav: tuple[NavLink, ...]
    sidebar: tuple[SidebarSection, ...]
    labels: LocaleLabels = LocaleLabels()

    def sidebar_for(self, path: str) -> SidebarSection | None:
        """Return the section registered for ``path``, if any."""
        for section in self.sidebar:
            if section.path == path:
                return section
        return None

    def sidebar_map(self) -> dict[str, tuple[SidebarGroup, ...]]:
        """Return the sidebar as a fresh mapping of section path to groups."""
        return {section.path: section.groups for section in self.sidebar}

    def nav_links(self) -> typ.Iterator[NavLink]:
        """Yield every nav entry, including dropdown items."""
        for entry in self.nav:
            yield from entry.walk()


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Immutable navigation model handed to the static-site renderer."""

    base_path: str
    routing_mode: RoutingMode
    locales: tuple[LocaleConfig, ...]
    default_locale: str
    title: str = ""
    description: str = ""
    plugins: tuple[str, ...] = ()

    @property
    def default(self) -> LocaleConfig:
        """Return the default locale."""
        return self.get_locale(self.default_locale)

    def get_locale(self, key: str | None) -> LocaleConfig:
        """Return the requested locale or fall back to the default one."""
        if key is None:
            key = self.default_locale
        for locale in self.locales:
            if locale.key == key:
                return locale
        available = ", ".join(locale.key for locale in self.locales)
        msg = f"Unknown locale '{key}'. Known locales: {available}"
        raise KeyError(msg)

    def all_paths(self) -> list[str]:
        """Return every internal resolved path in locale order."""
        paths: list[str] = []
        for locale in self.locales:
            paths.append(locale.prefix)
            paths.extend(
                entry.link
                for entry in locale.nav_links()
                if entry.link is not None and not entry.external
            )
            for section in locale.sidebar:
                paths.append(section.path)
                paths.extend(page for group in section.groups for page in group.pages)
        return paths

    def as_raw_form(self) -> dict[str, typ.Any]:
        """Return a canonical raw document that resolves back to this config."""
        return {
            "base_path": self.base_path,
            "routing_mode": str(self.routing_mode),
            "title": self.title,
            "description": self.description,
            "plugins": list(self.plugins),
            "locales": {
                locale.key: _locale_raw_form(locale) for locale in self.locales
            },
        }


def _nav_raw_form(entry: NavLink) -> dict[str, typ.Any]:
    payload: dict[str, typ.Any] = {"text": entry.text}
    if entry.link is not None:
        payload["link"] = entry.link
    if entry.items:
        payload["items"] = [_nav_raw_form(item) for item in entry.items]
    return payload


def _locale_raw_form(locale: LocaleConfig) -> dict[str, typ.Any]:
    payload: dict[str, typ.Any] = {
        "lang": locale.lang,
        "title": locale.title,
        "description": locale.description,
        "nav": [_nav_raw_form(entry) for entry in locale.nav],
        "sidebar": {
            section.path: [
                {
                    "title": group.title,
                    "collapsable": group.collapsable,
                    "children": list(group.children),
                }
                for group in section.groups
            ]
            for section in locale.sidebar
        },
    }
    labels = {
        name: value
        for name, value in dc.asdict(locale.labels).items()
        if value is not None
    }
    payload.update(labels)
    return payload


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
]
