"""Root Typer application for the staticfile finalizer."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from staticfile_common import BuildpackSettings, FinalizerConfig

from staticfile_buildpack.errors import StaticfileError
from staticfile_buildpack.finalizer import Finalizer
from staticfile_buildpack.log import BuildLogger

app = typer.Typer(
    name="staticfile-finalize",
    help="Turn a static app directory into a self-contained nginx runtime layout.",
    no_args_is_help=True,
)
console = Console(highlight=False, emoji=False)


@app.command()
def finalize(
    build_dir: Path = typer.Argument(..., help="Application directory being staged"),
    deps_dir: Path = typer.Argument(..., help="Dependency directory (receives profile.d)"),
) -> None:
    """Load the Staticfile, relocate content into public/ and write nginx config."""
    settings = BuildpackSettings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )
    log = BuildLogger(console, debug=settings.debug)
    cfg = FinalizerConfig(build_dir=build_dir.absolute(), dep_dir=deps_dir.absolute())

    try:
        Finalizer(cfg, log).run()
    except StaticfileError as exc:
        log.error(str(exc))
        raise typer.Exit(exc.exit_code) from exc
    except OSError as exc:
        log.error(f"finalize failed: {exc}")
        raise typer.Exit(1) from exc

    log.debug(f"nginx config written to {cfg.conf_dir}, content served from {cfg.public_dir}")


if __name__ == "__main__":
    app()
