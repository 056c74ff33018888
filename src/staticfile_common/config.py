"""Central configuration for a finalize run."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from staticfile_common.constants import NGINX_CONF_DIR, PROFILE_D_DIR, PUBLIC_DIR


class BuildpackSettings(BaseSettings):
    """Process-level switches read from ``BP_*`` environment variables."""

    debug: bool = False

    model_config = SettingsConfigDict(env_prefix="BP_")


class FinalizerConfig(BaseModel):
    """Directories of one finalize run, plus the paths derived from them."""

    build_dir: Path
    dep_dir: Path

    @property
    def public_dir(self) -> Path:
        return self.build_dir / PUBLIC_DIR

    @property
    def conf_dir(self) -> Path:
        return self.build_dir / NGINX_CONF_DIR

    @property
    def profile_d_dir(self) -> Path:
        return self.dep_dir / PROFILE_D_DIR
