"""Jinja2-based nginx.conf renderer and nginx/conf directory writer."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from staticfile_common import (
    HTPASSWD_NAME,
    MIME_TYPES_NAME,
    NGINX_CONF_DIR,
    NGINX_CONF_NAME,
    PUBLIC_DIR,
    STATICFILE_AUTH_NAME,
    Staticfile,
)
from staticfile_common.constants import NGINX_BUILDPACK_URL

from staticfile_buildpack.log import BuildLogger
from staticfile_buildpack.services.fragments import (
    hsts_header_value,
    https_redirect_fragment,
    listen_fragment,
)

log = logging.getLogger(__name__)

_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

DEFAULT_MIME_TYPES = (_TEMPLATE_DIR / "mime.types").read_text()


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATE_DIR)),
        autoescape=select_autoescape([]),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_nginx_conf(sf: Staticfile) -> str:
    """Render the full nginx.conf (an ERB template evaluated at boot)."""
    env = _get_env()
    template = env.get_template("nginx.conf.j2")
    return template.render(
        sf=sf,
        listen=listen_fragment(sf),
        https_redirect=https_redirect_fragment(sf),
        hsts_header=hsts_header_value(sf),
        status_codes=sorted(sf.status_codes.items()),
    )


def configure_nginx(build_dir: Path, sf: Staticfile, logger: BuildLogger) -> None:
    """Populate ``nginx/conf`` with nginx.conf, mime.types and, if needed, .htpasswd.

    A custom ``public/nginx.conf`` replaces the rendered config and is
    removed from the served content. A custom ``public/mime.types``
    replaces the bundled MIME table.
    """
    logger.begin_step("Configuring nginx")
    conf_dir = build_dir / NGINX_CONF_DIR
    public_dir = build_dir / PUBLIC_DIR
    conf_dir.mkdir(parents=True, exist_ok=True)

    custom_conf = public_dir / NGINX_CONF_NAME
    if custom_conf.exists():
        shutil.copyfile(custom_conf, conf_dir / NGINX_CONF_NAME)
        logger.warning(
            "overriding nginx.conf is deprecated and highly discouraged, as it breaks the "
            "functionality of the Staticfile and Staticfile.auth configuration directives. "
            f"Please use the NGINX buildpack available at: {NGINX_BUILDPACK_URL}"
        )
        custom_conf.unlink()
    else:
        log.debug("Rendering nginx.conf from template")
        (conf_dir / NGINX_CONF_NAME).write_text(render_nginx_conf(sf))
        if sf.basic_auth:
            shutil.copyfile(build_dir / STATICFILE_AUTH_NAME, conf_dir / HTPASSWD_NAME)

    custom_mime = public_dir / MIME_TYPES_NAME
    if custom_mime.exists():
        shutil.copyfile(custom_mime, conf_dir / MIME_TYPES_NAME)
    else:
        (conf_dir / MIME_TYPES_NAME).write_text(DEFAULT_MIME_TYPES)
