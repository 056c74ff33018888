"""Boot and profile scripts the runtime uses to start nginx."""

from __future__ import annotations

from pathlib import Path

from staticfile_common.constants import (
    BOOT_SCRIPT,
    NGINX_LOGS_DIR,
    PROFILE_D_DIR,
    PROFILE_SCRIPT,
    START_LOGGING_SCRIPT,
)

PROFILE_SH = "export LD_LIBRARY_PATH=$APP_ROOT/nginx/lib:$LD_LIBRARY_PATH\n"

START_LOGGING_SH = (
    "\n"
    "cat < $APP_ROOT/nginx/logs/access.log &\n"
    "(>&2 cat) < $APP_ROOT/nginx/logs/error.log &\n"
)

BOOT_SH = (
    "#!/bin/sh\n"
    "set -ex\n"
    "$APP_ROOT/start_logging.sh\n"
    "nginx -p $APP_ROOT/nginx -c $APP_ROOT/nginx/conf/nginx.conf\n"
)


def _write_script(path: Path, content: str, *, executable: bool) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    path.chmod(0o755 if executable else 0o644)


def write_startup_files(build_dir: Path, dep_dir: Path) -> None:
    """Write profile.d/staticfile.sh, start_logging.sh and boot.sh."""
    (build_dir / NGINX_LOGS_DIR).mkdir(parents=True, exist_ok=True)
    _write_script(dep_dir / PROFILE_D_DIR / PROFILE_SCRIPT, PROFILE_SH, executable=False)
    _write_script(build_dir / START_LOGGING_SCRIPT, START_LOGGING_SH, executable=True)
    _write_script(build_dir / BOOT_SCRIPT, BOOT_SH, executable=True)
