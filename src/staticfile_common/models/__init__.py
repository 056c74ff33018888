"""Shared Pydantic models."""

from staticfile_common.models.staticfile import Staticfile, StaticfileDirectives

__all__ = ["Staticfile", "StaticfileDirectives"]
