"""Content root resolution for the Staticfile ``root`` directive."""

from __future__ import annotations

from pathlib import Path

from staticfile_common import Staticfile

from staticfile_buildpack.errors import RootDirIsFileError, RootDirNotFoundError
from staticfile_buildpack.log import BuildLogger


def resolve_root_dir(build_dir: Path, sf: Staticfile, logger: BuildLogger) -> Path:
    """Return the absolute directory whose contents will be served."""
    root = build_dir / sf.root_dir.lstrip("/") if sf.root_dir else build_dir
    logger.begin_step(f"Root folder {root}")

    if not sf.root_dir:
        return build_dir

    if not root.exists():
        raise RootDirNotFoundError(
            f"the application Staticfile specifies a root directory {root} that does not exist"
        )
    if not root.is_dir():
        raise RootDirIsFileError(
            f"the application Staticfile specifies a root directory {root} that is a plain file"
        )
    return root.absolute()
