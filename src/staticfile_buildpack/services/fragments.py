"""nginx.conf fragments whose shape depends on the Staticfile.

Some directives are decided now, others are left to the app's environment
at boot: the generated nginx.conf is an ERB template that is evaluated by
the runtime before nginx starts. Both cases are represented as plain data.
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict

from staticfile_common import Staticfile
from staticfile_common.constants import HSTS_MAX_AGE

PORT = '<%= ENV["PORT"] %>'


class StaticFragment(BaseModel):
    """Lines emitted unconditionally."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["static"] = "static"
    lines: tuple[str, ...]

    def to_erb(self) -> str:
        return "\n".join(self.lines)


class RuntimeToggle(BaseModel):
    """Lines chosen at boot by whether an environment variable is set."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["runtime"] = "runtime"
    env_var: str
    when_set: tuple[str, ...]
    otherwise: tuple[str, ...] = ()

    def to_erb(self) -> str:
        out = [f'<% if ENV["{self.env_var}"] %>']
        out.extend(f"  {line}" for line in self.when_set)
        if self.otherwise:
            out.append("<% else %>")
            out.extend(f"  {line}" for line in self.otherwise)
        out.append("<% end %>")
        return "\n".join(out)


Fragment = Union[StaticFragment, RuntimeToggle]

HTTPS_REDIRECT = (
    'if ($best_proto != "https") {',
    "  return 301 https://$best_host$best_prefix$request_uri;",
    "}",
)


def listen_fragment(sf: Staticfile) -> Fragment:
    http2 = f"listen {PORT} http2;"
    if sf.enable_http2:
        return StaticFragment(lines=(http2,))
    return RuntimeToggle(env_var="ENABLE_HTTP2", when_set=(http2,), otherwise=(f"listen {PORT};",))


def https_redirect_fragment(sf: Staticfile) -> Fragment:
    if sf.force_https:
        return StaticFragment(lines=HTTPS_REDIRECT)
    return RuntimeToggle(env_var="FORCE_HTTPS", when_set=HTTPS_REDIRECT)


def hsts_header_value(sf: Staticfile) -> str | None:
    """Value of the Strict-Transport-Security header, or None when HSTS is off."""
    if not sf.hsts:
        return None
    value = f"max-age={HSTS_MAX_AGE}"
    if sf.hsts_include_subdomains:
        value += "; includeSubDomains"
    if sf.hsts_preload:
        value += "; preload"
    return value
