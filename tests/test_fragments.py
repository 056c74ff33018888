"""Tests for nginx.conf fragment selection."""

from __future__ import annotations

from staticfile_common import Staticfile
from staticfile_buildpack.services.fragments import (
    HTTPS_REDIRECT,
    RuntimeToggle,
    StaticFragment,
    hsts_header_value,
    https_redirect_fragment,
    listen_fragment,
)


class TestListenFragment:
    def test_http2_forced(self):
        frag = listen_fragment(Staticfile(enable_http2=True))
        assert frag == StaticFragment(lines=('listen <%= ENV["PORT"] %> http2;',))

    def test_http2_from_env(self):
        frag = listen_fragment(Staticfile())
        assert isinstance(frag, RuntimeToggle)
        assert frag.env_var == "ENABLE_HTTP2"
        assert frag.when_set == ('listen <%= ENV["PORT"] %> http2;',)
        assert frag.otherwise == ('listen <%= ENV["PORT"] %>;',)

    def test_toggle_erb(self):
        assert listen_fragment(Staticfile()).to_erb() == (
            '<% if ENV["ENABLE_HTTP2"] %>\n'
            '  listen <%= ENV["PORT"] %> http2;\n'
            "<% else %>\n"
            '  listen <%= ENV["PORT"] %>;\n'
            "<% end %>"
        )


class TestHttpsRedirectFragment:
    def test_forced(self):
        frag = https_redirect_fragment(Staticfile(force_https=True))
        assert frag.kind == "static"
        assert frag.to_erb() == "\n".join(HTTPS_REDIRECT)

    def test_from_env(self):
        frag = https_redirect_fragment(Staticfile())
        assert frag.kind == "runtime"
        erb = frag.to_erb()
        assert erb.startswith('<% if ENV["FORCE_HTTPS"] %>\n')
        assert "<% else %>" not in erb
        assert erb.endswith("<% end %>")


class TestHstsHeaderValue:
    def test_off(self):
        assert hsts_header_value(Staticfile()) is None

    def test_sub_flags_without_hsts(self):
        sf = Staticfile(hsts_include_subdomains=True, hsts_preload=True)
        assert hsts_header_value(sf) is None

    def test_plain(self):
        assert hsts_header_value(Staticfile(hsts=True)) == "max-age=31536000"

    def test_include_subdomains(self):
        sf = Staticfile(hsts=True, hsts_include_subdomains=True)
        assert hsts_header_value(sf) == "max-age=31536000; includeSubDomains"

    def test_preload(self):
        sf = Staticfile(hsts=True, hsts_preload=True)
        assert hsts_header_value(sf) == "max-age=31536000; preload"

    def test_both(self):
        sf = Staticfile(hsts=True, hsts_include_subdomains=True, hsts_preload=True)
        assert hsts_header_value(sf) == "max-age=31536000; includeSubDomains; preload"
