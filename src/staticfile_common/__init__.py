"""Staticfile Common: shared models and constants for the staticfile buildpack."""

from staticfile_common.constants import (
    HTPASSWD_NAME,
    METADATA_BLACKLIST,
    MIME_TYPES_NAME,
    NGINX_CONF_DIR,
    NGINX_CONF_NAME,
    PUBLIC_DIR,
    STATICFILE_AUTH_NAME,
    STATICFILE_NAME,
)
from staticfile_common.config import BuildpackSettings, FinalizerConfig
from staticfile_common.models.staticfile import Staticfile, StaticfileDirectives

__all__ = [
    "BuildpackSettings",
    "FinalizerConfig",
    "HTPASSWD_NAME",
    "METADATA_BLACKLIST",
    "MIME_TYPES_NAME",
    "NGINX_CONF_DIR",
    "NGINX_CONF_NAME",
    "PUBLIC_DIR",
    "STATICFILE_AUTH_NAME",
    "STATICFILE_NAME",
    "Staticfile",
    "StaticfileDirectives",
]
