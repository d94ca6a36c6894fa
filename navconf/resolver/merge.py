"""Locale fallback: merge the default locale's navigation into other locales.

The merge operates on draft values whose paths are still
:class:`~navconf.resolver.paths.LocalPath` instances, so a section inherited
from the default locale is re-expanded under the inheriting locale's key
rather than copied verbatim.
"""

from __future__ import annotations

import dataclasses as dc
import logging

from navconf.config.models import LocaleLabels

from .paths import LocalPath  # noqa: TC001 - dataclass field types

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class DraftNav:
    """Nav entry whose internal link has not been expanded yet."""

    text: str
    link: LocalPath | str | None
    items: tuple[DraftNav, ...] = ()

    def walk(self) -> list[DraftNav]:
        """Return this entry followed by every nested entry."""
        entries = [self]
        for item in self.items:
            entries.extend(item.walk())
        return entries


@dc.dataclass(frozen=True, slots=True)
class DraftGroup:
    """Sidebar group with section-relative page slugs."""

    title: str
    collapsable: bool
    children: tuple[str, ...]


@dc.dataclass(frozen=True, slots=True)
class DraftSection:
    """Sidebar section keyed by its locale-relative path."""

    path: LocalPath
    groups: tuple[DraftGroup, ...]


@dc.dataclass(frozen=True, slots=True)
class DraftLocale:
    """Locale values as authored; ``None`` marks a field left to fallback."""

    key: str
    lang: str | None = None
    title: str | None = None
    description: str | None = None
    nav: tuple[DraftNav, ...] | None = None
    sidebar: tuple[DraftSection, ...] | None = None
    labels: LocaleLabels = LocaleLabels()


def overlay_sidebar(
    base: tuple[DraftSection, ...], override: tuple[DraftSection, ...] | None
) -> tuple[DraftSection, ...]:
    """Overlay ``override`` sections on ``base`` by matching section path.

    Matched sections are replaced in place, unmatched base sections carry
    through once, and sections only present in ``override`` are appended.
    """
    combined: dict[LocalPath, DraftSection] = {
        section.path: section for section in base
    }
    for section in override or ():
        combined[section.path] = section
    return tuple(combined.values())


def merge_labels(base: LocaleLabels, override: LocaleLabels) -> LocaleLabels:
    """Fill unset label fields of ``override`` from ``base``."""
    return LocaleLabels(
        label=override.label or base.label,
        select_text=override.select_text or base.select_text,
        aria_label=override.aria_label or base.aria_label,
        edit_link_text=override.edit_link_text or base.edit_link_text,
        last_updated=override.last_updated or base.last_updated,
    )


def merge_default_locale(
    locale: DraftLocale,
    *,
    site_nav: tuple[DraftNav, ...] | None,
    site_sidebar: tuple[DraftSection, ...] | None,
) -> DraftLocale:
    """Apply site-wide nav and sidebar to the default locale."""
    nav = locale.nav
    if nav is None:
        logger.debug("locale %s uses the site-wide nav", locale.key)
        nav = site_nav or ()
    sidebar = overlay_sidebar(site_sidebar or (), locale.sidebar)
    return dc.replace(locale, nav=nav, sidebar=sidebar)


def merge_locale(locale: DraftLocale, default: DraftLocale) -> DraftLocale:
    """Fill ``locale`` from the already merged ``default`` locale."""
    nav = locale.nav
    if nav is None:
        logger.debug("locale %s inherits nav from %s", locale.key, default.key)
        nav = default.nav
    own = {section.path for section in locale.sidebar or ()}
    for section in default.sidebar or ():
        if section.path not in own:
            logger.debug(
                "locale %s inherits sidebar section %r from %s",
                locale.key,
                section.path.relative,
                default.key,
            )
    sidebar = overlay_sidebar(default.sidebar or (), locale.sidebar)
    return dc.replace(
        locale,
        nav=nav,
        sidebar=sidebar,
        labels=merge_labels(default.labels, locale.labels),
    )


__all__ = [
    "DraftGroup",
    "DraftLocale",
    "DraftNav",
    "DraftSection",
    "merge_default_locale",
    "merge_labels",
    "merge_locale",
    "overlay_sidebar",
]
