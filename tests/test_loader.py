"""Unit tests for loading raw site configuration documents from disk.

The loader accepts YAML, TOML, and JSON and hands the parsed mapping to the
resolver unchanged.

Usage
-----
Run ``pytest tests/test_loader.py -v``. Only pytest's ``tmp_path`` fixture is
required.
"""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

from navconf.config import ConfigError, ConfigErrorKind, load_raw_document, load_site_config

if typ.TYPE_CHECKING:
    from pathlib import Path

YAML_CONFIG = dedent(
    """
    base: /tank-websocket-go-server/
    title: Tank WebSocket
    themeConfig:
      nav:
        - { text: Home, link: / }
        - { text: Guide, link: /guide/ }
        - { text: GitHub, link: "https://github.com/fanqie/tank-websocket-go-server" }
      sidebar:
        /guide/:
          - title: Guide
            collapsable: false
            children: ["", installation, quick-start]
    locales:
      /:
        lang: en-US
      /zh/:
        lang: zh-CN
    """
).lstrip()


def test_yaml_document_resolves(tmp_path: Path) -> None:
    """A VuePress-style YAML config resolves with base-prefixed paths."""
    path = tmp_path / "config.yaml"
    path.write_text(YAML_CONFIG, encoding="utf-8")
    site = load_site_config(path)
    zh = site.get_locale("/zh/")
    assert [link.link for link in zh.nav] == [
        "/tank-websocket-go-server/zh/",
        "/tank-websocket-go-server/zh/guide/",
        "https://github.com/fanqie/tank-websocket-go-server",
    ]
    assert zh.sidebar[0].groups[0].children == ("", "installation", "quick-start")


def test_toml_document_loads(tmp_path: Path) -> None:
    """TOML documents load into plain mappings."""
    path = tmp_path / "config.toml"
    path.write_text(
        dedent(
            """
            base = "/proj/"
            routerMode = "hash"

            [[nav]]
            text = "Guide"
            link = "/guide/"

            [locales."/"]
            lang = "en-US"
            """
        ).lstrip(),
        encoding="utf-8",
    )
    raw = load_raw_document(path)
    assert raw["locales"] == {"/": {"lang": "en-US"}}
    site = load_site_config(path)
    assert site.default.nav[0].link == "/proj/#/guide/"


def test_json_document_loads(tmp_path: Path) -> None:
    """JSON documents load through msgspec."""
    path = tmp_path / "config.json"
    path.write_text(
        '{"basePath": "/proj", "locales": {"/": {}, "/proj/en/": {}}}',
        encoding="utf-8",
    )
    site = load_site_config(path)
    assert [locale.prefix for locale in site.locales] == ["/proj/", "/proj/en/"]


def test_resolution_errors_propagate(tmp_path: Path) -> None:
    """Loading does not mask resolver failures."""
    path = tmp_path / "config.yml"
    path.write_text("locales:\n  /en/: {}\n", encoding="utf-8")
    with pytest.raises(ConfigError) as excinfo:
        load_site_config(path)
    assert excinfo.value.kind is ConfigErrorKind.AMBIGUOUS_DEFAULT_LOCALE


def test_missing_file(tmp_path: Path) -> None:
    """A missing configuration file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_raw_document(tmp_path / "absent.yaml")


def test_unsupported_suffix(tmp_path: Path) -> None:
    """Only YAML, TOML, and JSON are understood."""
    path = tmp_path / "config.js"
    path.write_text("module.exports = {}", encoding="utf-8")
    with pytest.raises(ValueError, match="Unsupported configuration format"):
        load_raw_document(path)


def test_top_level_must_be_a_mapping(tmp_path: Path) -> None:
    """A YAML list at the top level is rejected."""
    path = tmp_path / "config.yaml"
    path.write_text("- /\n- /zh/\n", encoding="utf-8")
    with pytest.raises(TypeError):
        load_raw_document(path)
