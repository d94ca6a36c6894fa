"""Load raw site configuration documents from disk and resolve them."""

from __future__ import annotations

import tomllib
import typing as typ

import msgspec.json
from ruamel.yaml import YAML

from .models import SiteConfig  # noqa: TC001 - public return type

if typ.TYPE_CHECKING:
    from pathlib import Path

YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def load_raw_document(path: Path) -> dict[str, typ.Any]:
    """Read a raw configuration document without interpreting it.

    Parameters
    ----------
    path : Path
        Filesystem path to a ``.yaml``/``.yml``, ``.toml``, or ``.json`` file.

    Returns
    -------
    dict[str, Any]
        The parsed top-level mapping.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    ValueError
        If the file suffix is not a supported format.
    TypeError
        If the top-level structure is not a mapping.
    YAMLError, TOMLDecodeError, msgspec.DecodeError
        If the content cannot be parsed by the underlying loader.
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    suffix = path.suffix.lower()
    if suffix in YAML_SUFFIXES:
        loader = YAML(typ="safe")
        loader.version = (1, 2)
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle) or {}
    elif suffix == ".toml":
        loaded = tomllib.loads(path.read_text(encoding="utf-8"))
    elif suffix == ".json":
        loaded = msgspec.json.decode(path.read_bytes())
    else:
        msg = f"Unsupported configuration format '{path.suffix}' for '{path}'."
        raise ValueError(msg)

    if not isinstance(loaded, dict):
        msg = "Top-level configuration structure must be a mapping."
        raise TypeError(msg)
    return dict(loaded)


def load_site_config(path: Path) -> SiteConfig:
    """Load ``path`` and resolve it into a :class:`SiteConfig`.

    Raises
    ------
    ConfigError
        If the document loads but cannot be resolved.

    Examples
    --------
    >>> from pathlib import Path
    >>> from navconf.config import load_site_config
    >>> site = load_site_config(Path("docs/.vuepress/config.yaml"))  # doctest: +SKIP
    >>> site.default.prefix  # doctest: +SKIP
    '/project/'
    """
    from navconf.resolver import resolve

    return resolve(load_raw_document(path))


__all__ = ["YAML_SUFFIXES", "load_raw_document", "load_site_config"]
