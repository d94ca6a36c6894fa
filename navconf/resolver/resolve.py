"""Resolve a raw, hand-authored site configuration into a navigation model.

Resolution runs in three steps: every path-bearing field is normalized to a
locale-relative :class:`~navconf.resolver.paths.LocalPath`, non-default
locales are merged with the default locale, and the result is validated and
re-expanded so each path carries exactly one base path and one locale key.
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import typing as typ

from navconf._constants import DEFAULT_LANG, ROOT_LOCALE
from navconf.config.helpers import (
    BASE_PATH_KEYS,
    ROUTING_MODE_KEYS,
    _as_mapping,
    _build_labels,
    _first_present,
    _locale_tables,
    _optional_str,
    _plugin_names,
    _theme_config,
)
from navconf.config.models import (
    ConfigError,
    ConfigErrorKind,
    LocaleConfig,
    NavLink,
    RoutingMode,
    SidebarGroup,
    SidebarSection,
    SiteConfig,
)

from .merge import (
    DraftGroup,
    DraftLocale,
    DraftNav,
    DraftSection,
    merge_default_locale,
    merge_locale,
)
from .paths import (
    LocalPath,
    PathNormalizer,
    expand_path,
    is_external,
    normalize_base_path,
    normalize_locale_key,
)

logger = logging.getLogger(__name__)


def resolve(raw: typ.Mapping[str, typ.Any]) -> SiteConfig:
    """Resolve ``raw`` into an immutable, validated :class:`SiteConfig`.

    Parameters
    ----------
    raw : Mapping[str, Any]
        Configuration document as loaded from YAML, TOML, JSON, or an embedded
        literal. Both snake_case keys and VuePress camelCase keys
        (``base``, ``routerMode``, ``themeConfig``) are read. The document is
        never modified.

    Returns
    -------
    SiteConfig
        Navigation model in which every internal path is absolute and
        prefixed by exactly one base path and one locale key.

    Raises
    ------
    TypeError
        If ``raw`` is not a mapping.
    ConfigError
        ``DuplicateLocaleKey``, ``AmbiguousDefaultLocale``, ``OrphanSidebar``,
        ``MalformedPath``, or ``InvalidEntry`` when the document cannot be
        resolved. No partial result is returned.

    Examples
    --------
    >>> site = resolve(
    ...     {
    ...         "base": "/proj/",
    ...         "locales": {"/": {"nav": [{"text": "Guide", "link": "/guide/"}]}},
    ...     }
    ... )
    >>> site.default.nav[0].link
    '/proj/guide/'
    """
    if not isinstance(raw, cabc.Mapping):
        msg = "Site configuration must be a mapping."
        raise TypeError(msg)

    base_path = normalize_base_path(_first_present(raw, BASE_PATH_KEYS))
    routing_mode = _parse_routing_mode(_first_present(raw, ROUTING_MODE_KEYS))
    tables = _normalize_locale_tables(_locale_tables(raw), base_path, routing_mode)
    default_key = _default_locale_key(list(tables), routing_mode)
    normalizer = PathNormalizer(base_path, routing_mode, tuple(tables))

    theme = _theme_config(raw)
    site_nav = _first_defined(raw.get("nav"), theme.get("nav"))
    site_sidebar = _first_defined(raw.get("sidebar"), theme.get("sidebar"))
    default = merge_default_locale(
        _build_draft_locale(default_key, tables[default_key], normalizer),
        site_nav=_build_nav(site_nav, normalizer, default_key),
        site_sidebar=_build_sidebar(site_sidebar, normalizer, default_key),
    )
    drafts = [
        default
        if key == default_key
        else merge_locale(_build_draft_locale(key, payload, normalizer), default)
        for key, payload in tables.items()
    ]

    site_title = _optional_str(raw.get("title")) or default.title or ""
    site_description = _optional_str(raw.get("description")) or default.description or ""
    site_lang = _optional_str(raw.get("lang")) or DEFAULT_LANG
    locales = tuple(
        LocaleConfig(
            key=draft.key,
            prefix=expand_path(base_path, draft.key, "", routing_mode),
            lang=draft.lang or site_lang,
            title=draft.title or site_title,
            description=draft.description or site_description,
            nav=tuple(_expand_nav(entry, normalizer, draft.key) for entry in draft.nav or ()),
            sidebar=tuple(
                _expand_section(section, normalizer, draft.key)
                for section in draft.sidebar or ()
            ),
            labels=draft.labels,
        )
        for draft in drafts
    )
    _check_orphan_sidebars(locales)

    logger.info(
        "resolved %d locale(s) under base %r (%s routing, default %s)",
        len(locales),
        base_path or ROOT_LOCALE,
        routing_mode,
        default_key,
    )
    return SiteConfig(
        base_path=base_path,
        routing_mode=routing_mode,
        locales=locales,
        default_locale=default_key,
        title=site_title,
        description=site_description,
        plugins=_plugin_names(raw.get("plugins")),
    )


def _first_defined(*values: object) -> object:
    for value in values:
        if value is not None:
            return value
    return None


def _parse_routing_mode(value: object) -> RoutingMode:
    """Return the routing mode, accepting VuePress's ``history`` as ``path``."""
    text = _optional_str(value)
    if text is None:
        return RoutingMode.PATH
    match text.lower():
        case "path" | "history":
            return RoutingMode.PATH
        case "hash":
            return RoutingMode.HASH
        case _:
            raise ConfigError(
                ConfigErrorKind.INVALID_ENTRY,
                text,
                "routing mode must be 'path' or 'hash'",
            )


def _normalize_locale_tables(
    tables: cabc.Iterable[typ.Mapping[str, typ.Any]],
    base_path: str,
    routing_mode: RoutingMode,
) -> dict[str, dict[str, typ.Any]]:
    """Merge locale tables by normalized key, rejecting duplicates within one table.

    Keys keep the order of their first appearance, earlier tables first.
    """
    merged: dict[str, dict[str, typ.Any]] = {}
    for table in tables:
        authored: dict[str, str] = {}
        for key, payload in table.items():
            canonical = normalize_locale_key(key, base_path, routing_mode)
            if canonical in authored:
                raise ConfigError(
                    ConfigErrorKind.DUPLICATE_LOCALE_KEY,
                    key,
                    f"locale key normalizes to {canonical!r}, "
                    f"already used by {authored[canonical]!r}",
                )
            authored[canonical] = key
            merged.setdefault(canonical, {}).update(_as_mapping(payload))
    return merged


def _default_locale_key(keys: list[str], routing_mode: RoutingMode) -> str:
    """Return the root locale, or the first locale under hash routing."""
    if ROOT_LOCALE in keys:
        return ROOT_LOCALE
    if routing_mode is RoutingMode.HASH and keys:
        return keys[0]
    subject = ", ".join(keys) or "<no locales>"
    raise ConfigError(
        ConfigErrorKind.AMBIGUOUS_DEFAULT_LOCALE,
        subject,
        f"no locale can act as default under {routing_mode} routing; "
        f"add a {ROOT_LOCALE!r} locale",
    )


def _build_draft_locale(
    key: str, payload: typ.Mapping[str, typ.Any], normalizer: PathNormalizer
) -> DraftLocale:
    """Build a DraftLocale from one merged locale payload."""
    return DraftLocale(
        key=key,
        lang=_optional_str(payload.get("lang")),
        title=_optional_str(payload.get("title")),
        description=_optional_str(payload.get("description")),
        nav=_build_nav(payload.get("nav"), normalizer, key),
        sidebar=_build_sidebar(payload.get("sidebar"), normalizer, key),
        labels=_build_labels(payload),
    )


def _build_nav(
    entries: object, normalizer: PathNormalizer, context: str
) -> tuple[DraftNav, ...] | None:
    """Build draft nav entries; ``None`` when the field is absent."""
    match entries:
        case None:
            return None
        case list() | tuple():
            return tuple(_build_nav_entry(entry, normalizer, context) for entry in entries)
        case _:
            raise ConfigError(
                ConfigErrorKind.INVALID_ENTRY,
                f"{context} nav",
                "nav must be a list of entries",
            )


def _build_nav_entry(
    entry: object, normalizer: PathNormalizer, context: str
) -> DraftNav:
    match entry:
        case {"text": str() as text, **rest}:
            pass
        case _:
            raise ConfigError(
                ConfigErrorKind.INVALID_ENTRY,
                repr(entry),
                f"nav entries of locale {context} require a 'text' field",
            )
    items = tuple(
        _build_nav_entry(item, normalizer, context) for item in rest.get("items") or ()
    )
    link = rest.get("link")
    if link is None:
        if not items:
            raise ConfigError(
                ConfigErrorKind.INVALID_ENTRY,
                text,
                f"nav entry of locale {context} needs a 'link' or 'items'",
            )
        return DraftNav(text=text, link=None, items=items)
    if isinstance(link, str) and is_external(link.strip()):
        return DraftNav(text=text, link=link.strip(), items=items)
    local = normalizer.normalize(link, context=context, field="nav link")
    return DraftNav(text=text, link=local, items=items)


def _build_sidebar(
    value: object, normalizer: PathNormalizer, context: str
) -> tuple[DraftSection, ...] | None:
    """Build draft sidebar sections; a bare list is the locale root section."""
    match value:
        case None:
            return None
        case list() | tuple():
            sections = {ROOT_LOCALE: value}
        case cabc.Mapping():
            sections = value
        case _:
            raise ConfigError(
                ConfigErrorKind.INVALID_ENTRY,
                f"{context} sidebar",
                "sidebar must be a mapping of section paths to groups",
            )
    drafts: list[DraftSection] = []
    for key, groups in sections.items():
        path = normalizer.normalize(key, context=context, field="sidebar section")
        if path.locale is not None:
            raise ConfigError(
                ConfigErrorKind.MALFORMED_PATH,
                key,
                f"sidebar section of locale {context} points into locale {path.locale}",
            )
        drafts.append(
            DraftSection(
                path=path,
                groups=_build_groups(groups, path, normalizer, context),
            )
        )
    return tuple(drafts)


def _build_groups(
    entries: object, section: LocalPath, normalizer: PathNormalizer, context: str
) -> tuple[DraftGroup, ...]:
    match entries:
        case list() | tuple():
            pass
        case _:
            raise ConfigError(
                ConfigErrorKind.INVALID_ENTRY,
                f"/{section.relative}",
                "sidebar section must list its groups",
            )
    groups: list[DraftGroup] = []
    loose: list[str] = []
    for entry in entries:
        match entry:
            case cabc.Mapping():
                if loose:
                    groups.append(DraftGroup(title="", collapsable=True, children=tuple(loose)))
                    loose = []
                groups.append(_build_group(entry, section, normalizer, context))
            case _:
                loose.append(_child_slug(entry, section, normalizer, context))
    if loose:
        groups.append(DraftGroup(title="", collapsable=True, children=tuple(loose)))
    return tuple(groups)


def _build_group(
    entry: typ.Mapping[str, typ.Any],
    section: LocalPath,
    normalizer: PathNormalizer,
    context: str,
) -> DraftGroup:
    children = entry.get("children") or ()
    if not isinstance(children, list | tuple):
        raise ConfigError(
            ConfigErrorKind.INVALID_ENTRY,
            str(entry.get("title", "")),
            "sidebar group children must be a list",
        )
    return DraftGroup(
        title=str(entry.get("title") or ""),
        collapsable=bool(entry.get("collapsable", True)),
        children=tuple(
            _child_slug(child, section, normalizer, context) for child in children
        ),
    )


def _child_slug(
    child: object, section: LocalPath, normalizer: PathNormalizer, context: str
) -> str:
    """Return a page slug relative to ``section``."""
    match child:
        case [str() as path, *_]:
            child = path
        case str():
            pass
        case _:
            raise ConfigError(
                ConfigErrorKind.MALFORMED_PATH,
                repr(child),
                "sidebar children must be page slugs",
            )
    text = child.strip()
    if is_external(text):
        raise ConfigError(
            ConfigErrorKind.MALFORMED_PATH,
            text,
            "sidebar children must be internal pages, not external URLs",
        )
    if not text.startswith("/"):
        return text
    local = normalizer.normalize(text, context=context, field="sidebar child")
    prefix = section.relative
    if local.locale is None:
        if local.relative.startswith(prefix):
            return local.relative[len(prefix) :]
        if local.relative == prefix[:-1]:
            return ""
    raise ConfigError(
        ConfigErrorKind.MALFORMED_PATH,
        text,
        f"sidebar child lies outside its section '/{prefix}'",
    )


def _expand_nav(entry: DraftNav, normalizer: PathNormalizer, context: str) -> NavLink:
    match entry.link:
        case LocalPath() as local:
            link: str | None = normalizer.expand(local, context)
        case other:
            link = other
    return NavLink(
        text=entry.text,
        link=link,
        items=tuple(_expand_nav(item, normalizer, context) for item in entry.items),
    )


def _expand_section(
    section: DraftSection, normalizer: PathNormalizer, context: str
) -> SidebarSection:
    path = normalizer.expand(section.path, context)
    return SidebarSection(
        path=path,
        groups=tuple(
            SidebarGroup(
                title=group.title,
                collapsable=group.collapsable,
                children=group.children,
                pages=tuple(f"{path}{child}" for child in group.children),
            )
            for group in section.groups
        ),
    )


def _reaches(target: str, section_path: str) -> bool:
    """Return whether a nav target points at or into a sidebar section."""
    if target.rstrip("/") == section_path.rstrip("/"):
        return True
    return section_path.endswith("/") and target.startswith(section_path)


def _check_orphan_sidebars(locales: tuple[LocaleConfig, ...]) -> None:
    """Reject sidebar sections that no nav entry in any locale reaches."""
    targets = [
        entry.link
        for locale in locales
        for entry in locale.nav_links()
        if entry.link is not None and not entry.external
    ]
    for locale in locales:
        for section in locale.sidebar:
            if not any(_reaches(target, section.path) for target in targets):
                raise ConfigError(
                    ConfigErrorKind.ORPHAN_SIDEBAR,
                    section.path,
                    f"sidebar section of locale {locale.key} has no nav entry",
                )


__all__ = ["resolve"]
