"""Staticfile loading: YAML directives into a strict Staticfile config."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

import yaml
from pydantic import ValidationError

from staticfile_common import STATICFILE_AUTH_NAME, STATICFILE_NAME, Staticfile, StaticfileDirectives
from staticfile_common.constants import BASIC_AUTH_DOCS_URL

from staticfile_buildpack.errors import StaticfileParseError
from staticfile_buildpack.log import BuildLogger

log = logging.getLogger(__name__)

YamlLoader = Callable[[Path], Any]


def load_yaml_file(path: Path) -> Any:
    """Read and parse a YAML file. Raises FileNotFoundError if it is absent."""
    with open(path, "rb") as f:
        return yaml.safe_load(f)


def read_directives(path: Path, load_yaml: YamlLoader = load_yaml_file) -> StaticfileDirectives:
    """Load raw directives; a missing file yields all defaults."""
    try:
        data = load_yaml(path)
    except FileNotFoundError:
        log.debug("No Staticfile at %s, using defaults", path)
        return StaticfileDirectives()
    except yaml.YAMLError as exc:
        raise StaticfileParseError(f"could not parse {path}: {exc}") from exc

    if data is None:
        return StaticfileDirectives()
    if not isinstance(data, dict):
        raise StaticfileParseError(
            f"could not parse {path}: expected a mapping of directives, got {type(data).__name__}"
        )
    try:
        return StaticfileDirectives.model_validate(data)
    except ValidationError as exc:
        raise StaticfileParseError(f"could not parse {path}: {exc}") from exc


def _log_enabled(sf: Staticfile, logger: BuildLogger) -> None:
    if sf.host_dot_files:
        logger.begin_step("Enabling hosting of dotfiles")
    if sf.location_include:
        logger.begin_step(f"Enabling location include file {sf.location_include}")
    if sf.directory_index:
        logger.begin_step("Enabling directory index for folders without index.html files")
    if sf.ssi:
        logger.begin_step("Enabling SSI")
    if sf.push_state:
        logger.begin_step("Enabling pushstate")
    if sf.hsts:
        logger.begin_step("Enabling HSTS")
    if sf.hsts_include_subdomains:
        logger.begin_step("Enabling HSTS includeSubDomains")
    if sf.hsts_preload:
        logger.begin_step("Enabling HSTS Preload")
    if sf.enable_http2:
        logger.begin_step("Enabling HTTP/2")
    if sf.force_https:
        logger.begin_step("Enabling HTTPS redirect")
    if sf.status_codes:
        logger.begin_step("Enabling custom pages for status_codes")


def load_staticfile(
    build_dir: Path,
    logger: BuildLogger,
    load_yaml: YamlLoader = load_yaml_file,
) -> Staticfile:
    """Build the Staticfile config for ``build_dir``.

    A missing Staticfile is not an error. Basic auth is switched on purely by
    the presence of ``Staticfile.auth``, whatever happened to the Staticfile.
    """
    raw = read_directives(build_dir / STATICFILE_NAME, load_yaml)

    auth_present = (build_dir / STATICFILE_AUTH_NAME).exists()
    sf = Staticfile.from_directives(raw, basic_auth=auth_present, auth_file_present=auth_present)

    _log_enabled(sf, logger)
    if sf.basic_auth:
        logger.begin_step(f"Enabling basic authentication using {STATICFILE_AUTH_NAME}")
        logger.info(f"Learn about basic authentication at {BASIC_AUTH_DOCS_URL}")
    return sf
