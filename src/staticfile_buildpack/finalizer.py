"""The finalize pipeline: Staticfile in, runnable nginx layout out."""

from __future__ import annotations

from pathlib import Path

from staticfile_common import FinalizerConfig, Staticfile

from staticfile_buildpack.log import BuildLogger
from staticfile_buildpack.services import checks, directives, nginx_renderer, partition, root_dir, startup
from staticfile_buildpack.services.directives import YamlLoader


class Finalizer:
    """Runs every finalize step once, in order. The first error aborts the run."""

    def __init__(
        self,
        config: FinalizerConfig,
        log: BuildLogger,
        load_yaml: YamlLoader = directives.load_yaml_file,
    ):
        self.config = config
        self.log = log
        self.load_yaml = load_yaml
        self.staticfile = Staticfile()

    def load_staticfile(self) -> Staticfile:
        self.staticfile = directives.load_staticfile(self.config.build_dir, self.log, self.load_yaml)
        return self.staticfile

    def app_root_dir(self) -> Path:
        return root_dir.resolve_root_dir(self.config.build_dir, self.staticfile, self.log)

    def warnings(self) -> None:
        checks.check_warnings(self.config.build_dir, self.staticfile, self.log)

    def copy_files_to_public(self, app_root: Path) -> None:
        partition.copy_files_to_public(self.config.build_dir, app_root, self.staticfile, self.log)

    def configure_nginx(self) -> None:
        nginx_renderer.configure_nginx(self.config.build_dir, self.staticfile, self.log)

    def write_startup_files(self) -> None:
        startup.write_startup_files(self.config.build_dir, self.config.dep_dir)

    def run(self) -> None:
        self.load_staticfile()
        app_root = self.app_root_dir()
        self.warnings()
        self.copy_files_to_public(app_root)
        self.configure_nginx()
        self.write_startup_files()
