"""Common literal values used across navconf.

These constants keep path markers and defaults centralized so the resolver,
loader, CLI, and tests import the same values without drifting. Intended for
internal use within the navconf package.

Examples
--------
>>> from navconf import _constants
>>> _constants.ROOT_LOCALE
'/'
>>> "https://example.com".startswith(_constants.EXTERNAL_SCHEMES)
True
"""

from pathlib import Path

ROOT_LOCALE = "/"
HASH_MARKER = "#"
EXTERNAL_SCHEMES = ("http://", "https://")
DEFAULT_LANG = "en-US"
DEFAULT_CONFIG = Path("docs/.vuepress/config.yaml")
