"""Staticfile directive models: raw on-disk form and the strict configuration."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from staticfile_common.status_codes import expand_status_codes


def _as_text(value: Any) -> str:
    # YAML hands back bools and numbers where the directive file means strings
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class StaticfileDirectives(BaseModel):
    """Loosely-typed directives exactly as written in a Staticfile."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    root_dir: str = Field(default="", alias="root")
    host_dot_files: str = ""
    location_include: str = ""
    directory_index: str = Field(default="", alias="directory")
    ssi: str = ""
    push_state: str = Field(default="", alias="pushstate")
    hsts: str = Field(default="", alias="http_strict_transport_security")
    hsts_include_subdomains: str = Field(
        default="", alias="http_strict_transport_security_include_subdomains"
    )
    hsts_preload: str = Field(default="", alias="http_strict_transport_security_preload")
    enable_http2: str = ""
    force_https: str = ""
    status_codes: dict[str, str] = Field(default_factory=dict)

    @field_validator("*", mode="before")
    @classmethod
    def _stringify(cls, value: Any, info: ValidationInfo) -> Any:
        if info.field_name == "status_codes":
            if value is None:
                return {}
            if isinstance(value, dict):
                # nested values are left for validation to reject
                return {
                    _as_text(k): v if isinstance(v, (dict, list)) else _as_text(v)
                    for k, v in value.items()
                }
            return value
        if isinstance(value, (dict, list)):
            return value
        return _as_text(value)


class Staticfile(BaseModel):
    """Strict, read-only configuration consumed by every finalize step."""

    model_config = ConfigDict(frozen=True)

    root_dir: str = ""
    host_dot_files: bool = False
    location_include: str = ""
    directory_index: bool = False
    ssi: bool = False
    push_state: bool = False
    hsts: bool = False
    hsts_include_subdomains: bool = False
    hsts_preload: bool = False
    enable_http2: bool = False
    force_https: bool = False
    status_codes: dict[str, str] = Field(default_factory=dict)
    basic_auth: bool = False
    auth_file_present: bool = False

    @classmethod
    def from_directives(cls, raw: StaticfileDirectives, **extra: Any) -> Staticfile:
        """Apply the directive coercions.

        ``directory`` is enabled by any non-empty value while every other
        flag needs the literal ``"true"``. Existing Staticfiles rely on this
        asymmetry, so it is kept as is. ``ssi`` and ``pushstate`` also accept
        ``"enabled"``, the spelling documented for them.
        """
        return cls(
            root_dir=raw.root_dir,
            host_dot_files=raw.host_dot_files == "true",
            location_include=raw.location_include,
            directory_index=raw.directory_index != "",
            ssi=raw.ssi in ("true", "enabled"),
            push_state=raw.push_state in ("true", "enabled"),
            hsts=raw.hsts == "true",
            hsts_include_subdomains=raw.hsts_include_subdomains == "true",
            hsts_preload=raw.hsts_preload == "true",
            enable_http2=raw.enable_http2 == "true",
            force_https=raw.force_https == "true",
            status_codes=expand_status_codes(raw.status_codes),
            **extra,
        )
