"""Post-hoc sanity checks on the app layout."""

from __future__ import annotations

import os
from pathlib import Path

from staticfile_common import NGINX_CONF_DIR, Staticfile

from staticfile_buildpack.log import BuildLogger


def root_is_build_dir(root_dir: str) -> bool:
    """True for an unset root and anything that normalizes to ``.``."""
    return os.path.normpath(root_dir or ".") == "."


def check_warnings(build_dir: Path, sf: Staticfile, logger: BuildLogger) -> None:
    """Warn about an nginx/conf directory that will be served as content."""
    if (build_dir / NGINX_CONF_DIR).is_dir() and root_is_build_dir(sf.root_dir):
        logger.warning(
            "You have an nginx/conf directory, but have not set *root*, or have set it to '.'.\n"
            "If you are using the nginx/conf directory for nginx configuration, "
            "you probably need to also set the *root* directive."
        )
