"""Cyclopts CLI entrypoint for resolving documentation-site navigation configs.

The ``navconf`` console script loads a raw VuePress-style site configuration,
resolves it into the canonical navigation model, and prints the result so
build tooling can halt on configuration errors before rendering anything.
Typical usage is ``navconf check`` in CI and ``navconf resolve`` to hand the
canonical document to a renderer.

Examples
--------
Validate the default configuration file:

>>> from navconf.cli import main
>>> main()  # doctest: +SKIP

Dump the resolved Chinese locale as YAML:

>>> from navconf.cli import app
>>> app.run(
...     ["resolve", "--locale", "/zh/", "--format", "yaml"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import io
import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
import msgspec.json
from cyclopts import App, Parameter
from ruamel.yaml import YAML

from ._constants import DEFAULT_CONFIG
from .config import ConfigError, SiteConfig, load_site_config

OutputFormat = typ.Literal["json", "yaml"]

app = App(name="navconf", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _configure_logging(*, verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _load_or_exit(config: Path) -> SiteConfig:
    """Resolve ``config`` or exit with the error kind and offending path."""
    try:
        return load_site_config(config)
    except ConfigError as exc:
        print(f"{config}: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def _dump(payload: dict[str, typ.Any], output_format: OutputFormat) -> str:
    if output_format == "yaml":
        yaml = YAML()
        yaml.width = 120
        yaml.indent(mapping=2, sequence=4, offset=2)
        stream = io.StringIO()
        yaml.dump(payload, stream)
        return stream.getvalue().rstrip("\n")
    return msgspec.json.format(msgspec.json.encode(payload), indent=2).decode("utf-8")


@app.command(help="Print the resolved navigation model.")
def resolve(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    locale: typ.Annotated[
        str | None, Parameter(help="Only print this locale key", env_var="INPUT_LOCALE")
    ] = None,
    output_format: typ.Annotated[
        OutputFormat, Parameter(name="--format", help="Output format")
    ] = "json",
    verbose: bool = False,
) -> None:
    """Print the canonical, resolved form of the site configuration.

    Parameters
    ----------
    config : Path, optional
        Path to the raw configuration (overridable via ``INPUT_CONFIG``).
    locale : str or None, optional
        Locale key such as ``/zh/``; when given only that locale is printed.
    output_format : {"json", "yaml"}, optional
        Serialization used for the printed document.
    verbose : bool, optional
        Emit resolver debug logging to stderr.

    Raises
    ------
    SystemExit
        With status 1 when the configuration cannot be resolved or when
        ``locale`` names a locale it does not define.
    """
    _configure_logging(verbose=verbose)
    site = _load_or_exit(config)
    payload = site.as_raw_form()
    if locale is not None:
        try:
            key = site.get_locale(locale).key
        except KeyError as exc:
            print(f"{config}: {exc.args[0]}", file=sys.stderr)
            raise SystemExit(1) from exc
        payload = {key: payload["locales"][key]}
    print(_dump(payload, output_format))


@app.command(help="Validate a site config and summarize each locale.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    verbose: bool = False,
) -> None:
    """Resolve the configuration and print one summary line per locale."""
    _configure_logging(verbose=verbose)
    site = _load_or_exit(config)
    for locale in site.locales:
        marker = "*" if locale.key == site.default_locale else " "
        print(
            f"{marker} {locale.key} ({locale.lang}) -> {locale.prefix}: "
            f"{len(locale.nav)} nav, {len(locale.sidebar)} sidebar"
        )


@app.command(help="List every resolved internal path.")
def paths(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print each distinct resolved internal path, one per line."""
    site = _load_or_exit(config)
    for path in dict.fromkeys(site.all_paths()):
        print(path)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``navconf`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
