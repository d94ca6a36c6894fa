"""Utility helpers for reading raw, hand-authored site configuration documents."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .models import LocaleLabels

BASE_PATH_KEYS = ("base_path", "basePath", "base")
ROUTING_MODE_KEYS = ("routing_mode", "routingMode", "routerMode")
THEME_CONFIG_KEYS = ("themeConfig", "theme_config")
LABEL_KEYS: dict[str, tuple[str, ...]] = {
    "label": ("label",),
    "select_text": ("select_text", "selectText"),
    "aria_label": ("aria_label", "ariaLabel"),
    "edit_link_text": ("edit_link_text", "editLinkText"),
    "last_updated": ("last_updated", "lastUpdated"),
}


def _first_present(payload: typ.Mapping[str, typ.Any], keys: tuple[str, ...]) -> typ.Any:
    """Return the value of the first key present in ``payload``, else None."""
    for key in keys:
        if key in payload:
            return payload[key]
    return None


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _as_mapping(value: object) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` when it is a mapping, otherwise an empty mapping."""
    match value:
        case cabc.Mapping():
            return value
        case _:
            return {}


def _theme_config(raw: typ.Mapping[str, typ.Any]) -> typ.Mapping[str, typ.Any]:
    """Return the VuePress ``themeConfig`` block, or an empty mapping."""
    return _as_mapping(_first_present(raw, THEME_CONFIG_KEYS))


def _locale_tables(
    raw: typ.Mapping[str, typ.Any],
) -> tuple[typ.Mapping[str, typ.Any], typ.Mapping[str, typ.Any]]:
    """Return the top-level ``locales`` table and ``themeConfig.locales``.

    VuePress keeps ``lang``/``title``/``description`` in the top-level table
    and nav, sidebar and switcher labels under ``themeConfig``, so one locale
    is usually split across both.
    """
    return (
        _as_mapping(raw.get("locales")),
        _as_mapping(_theme_config(raw).get("locales")),
    )


def _build_labels(payload: typ.Mapping[str, typ.Any]) -> LocaleLabels:
    """Build the language-switcher labels from a locale payload."""
    return LocaleLabels(
        **{
            name: _optional_str(_first_present(payload, keys))
            for name, keys in LABEL_KEYS.items()
        }
    )


def _plugin_names(value: object) -> tuple[str, ...]:
    """Return plugin names from strings or ``[name, options]`` pairs."""
    names: list[str] = []
    match value:
        case list() as entries:
            pass
        case _:
            return ()
    for entry in entries:
        match entry:
            case str() as name:
                names.append(name)
            case [str() as name, *_]:
                names.append(name)
            case _:
                continue
    return tuple(names)


__all__ = [
    "BASE_PATH_KEYS",
    "LABEL_KEYS",
    "ROUTING_MODE_KEYS",
    "THEME_CONFIG_KEYS",
    "_as_mapping",
    "_build_labels",
    "_first_present",
    "_locale_tables",
    "_optional_str",
    "_plugin_names",
    "_theme_config",
]
