"""Relocation of app content into ``public/``, leaving build metadata behind."""

from __future__ import annotations

import enum
import logging
import shutil
import tempfile
from pathlib import Path

from staticfile_common import METADATA_BLACKLIST, PUBLIC_DIR, Staticfile

from staticfile_buildpack.log import BuildLogger

log = logging.getLogger(__name__)


class Placement(enum.Enum):
    CONTENT = "content"
    SKIP_METADATA = "skip_metadata"
    SKIP_HIDDEN = "skip_hidden"


def classify(name: str, host_dot_files: bool) -> Placement:
    """Decide whether a top-level entry of the app root is served content."""
    if name in METADATA_BLACKLIST:
        return Placement.SKIP_METADATA
    if name.startswith(".") and not host_dot_files:
        return Placement.SKIP_HIDDEN
    return Placement.CONTENT


def content_entries(app_root: Path, host_dot_files: bool) -> list[Path]:
    """Entries of ``app_root`` that belong in ``public/``, sorted by name."""
    return [
        entry
        for entry in sorted(app_root.iterdir())
        if classify(entry.name, host_dot_files) is Placement.CONTENT
    ]


def copy_files_to_public(
    build_dir: Path, app_root: Path, sf: Staticfile, logger: BuildLogger
) -> None:
    """Move served content from ``app_root`` into ``<build_dir>/public``.

    Entries are moved, not copied. An existing ``public/`` is replaced
    wholesale unless it already is the app root, in which case nothing moves.
    """
    logger.begin_step("Copying project files into public")
    public_dir = build_dir / PUBLIC_DIR
    if public_dir.resolve() == app_root.resolve():
        return

    entries = content_entries(app_root, sf.host_dot_files)

    staging = Path(tempfile.mkdtemp(prefix=".staticfile-public.", dir=build_dir))
    staging.chmod(0o755)
    for entry in entries:
        log.debug("Moving %s to %s", entry, staging)
        shutil.move(str(entry), str(staging / entry.name))

    if public_dir.is_dir() and not public_dir.is_symlink():
        shutil.rmtree(public_dir)
    elif public_dir.exists() or public_dir.is_symlink():
        public_dir.unlink()
    staging.rename(public_dir)
