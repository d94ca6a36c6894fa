"""Shared fixtures describing hand-authored VuePress site configurations.

The two documents mirror the drifting conventions found in real docs sites:
``multi_locale_document`` keeps nav and sidebar under ``themeConfig`` with
bare paths, while ``hash_routed_document`` serves under a base path with hash
routing and keys the default locale's pages under an ``/en/`` segment that is
not itself a locale.
"""

from __future__ import annotations

import typing as typ

import pytest

GUIDE_PAGES = [
    "",
    "installation",
    "quick-start",
    "client-connection",
    "heartbeat",
    "authentication",
    "debug-logging",
]
REPO_URL = "https://github.com/fanqie/tank-websocket-go-server"


@pytest.fixture
def guide_pages() -> tuple[str, ...]:
    """Return the guide page slugs both documents list, in order."""
    return tuple(GUIDE_PAGES)


@pytest.fixture
def repo_url() -> str:
    """Return the external repository link the documents' nav carries."""
    return REPO_URL


@pytest.fixture
def multi_locale_document() -> dict[str, typ.Any]:
    """Return a two-locale document whose Chinese locale omits its sidebar."""
    return {
        "title": "Tank WebSocket",
        "description": "A lightweight WebSocket server",
        "themeConfig": {
            "nav": [
                {"text": "Home", "link": "/"},
                {"text": "Guide", "link": "/guide/"},
                {"text": "API", "link": "/api/"},
                {"text": "GitHub", "link": REPO_URL},
            ],
            "sidebar": {
                "/guide/": [
                    {"title": "Guide", "collapsable": False, "children": GUIDE_PAGES}
                ],
                "/api/": [
                    {
                        "title": "API Reference",
                        "collapsable": False,
                        "children": ["", "manager", "client"],
                    }
                ],
            },
            "locales": {
                "/": {
                    "selectText": "Languages",
                    "label": "English",
                    "editLinkText": "Edit this page on GitHub",
                    "lastUpdated": "Last Updated",
                    "nav": [
                        {"text": "Home", "link": "/"},
                        {"text": "Guide", "link": "/guide/"},
                        {"text": "API", "link": "/api/"},
                        {"text": "GitHub", "link": REPO_URL},
                    ],
                },
                "/zh/": {
                    "selectText": "选择语言",
                    "label": "简体中文",
                    "nav": [
                        {"text": "首页", "link": "/zh/"},
                        {"text": "指南", "link": "/zh/guide/"},
                        {"text": "API", "link": "/zh/api/"},
                        {"text": "GitHub", "link": REPO_URL},
                    ],
                },
            },
        },
        "locales": {
            "/": {"lang": "en-US", "title": "Tank WebSocket"},
            "/zh/": {"lang": "zh-CN", "description": "轻量级 WebSocket 服务器"},
        },
        "plugins": ["@vuepress/back-to-top", ["@vuepress/medium-zoom", {}]],
    }


@pytest.fixture
def hash_routed_document() -> dict[str, typ.Any]:
    """Return a hash-routed document served under a project base path."""
    guide = [{"title": "Guide", "collapsable": False, "children": GUIDE_PAGES}]
    return {
        "base": "/tank-websocket-go-server/",
        "routerMode": "hash",
        "title": "Tank WebSocket",
        "locales": {
            "/": {
                "lang": "en-US",
                "nav": [
                    {"text": "Home", "link": "/en/"},
                    {"text": "Guide", "link": "/en/guide/"},
                ],
                "sidebar": {"/en/guide/": guide},
            },
            "/zh/": {
                "lang": "zh-CN",
                "nav": [
                    {"text": "首页", "link": "/zh/"},
                    {"text": "指南", "link": "/zh/guide/"},
                ],
                "sidebar": {"/zh/guide/": guide},
            },
        },
    }
