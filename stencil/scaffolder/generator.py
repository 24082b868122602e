"""Main scaffolding orchestrator.

Takes a project name and materialises a new project directory from the
bundled template tree, then installs its dependencies. The flow is strictly
linear: validate, check the target is free, create it, copy, install.
Nothing is rolled back on failure.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path

from rich.markup import escape

from stencil.config import Config
from stencil.errors import ConflictError, FilesystemError, UsageError
from stencil.utils import print_info

from .copier import copy_tree
from .installer import DependencyInstaller


@dataclass
class ScaffoldResult:
    """Outcome of a successful scaffolding run."""

    project_root: Path
    files: list[Path] = field(default_factory=list)
    install_command: str = ""
    duration: float = 0.0


class ProjectGenerator:
    """Creates a project directory from the template tree.

    Example::

        generator = ProjectGenerator(Config.from_env())
        result = await generator.generate("demo", Path.cwd())
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()
        self.installer = DependencyInstaller(self.config.install_argv)

    # -- Public API --------------------------------------------------------

    async def generate(
        self, project_name: str | None, parent_dir: str | Path | None = None
    ) -> ScaffoldResult:
        """Scaffold *project_name* inside *parent_dir*.

        Args:
            project_name: Name of the new project, used verbatim as a path
                segment.
            parent_dir: Directory the project folder is created in.
                Defaults to the current working directory.

        Returns:
            A ``ScaffoldResult`` describing the new project.

        Raises:
            UsageError: If *project_name* is missing or empty.
            ConflictError: If the target path already exists.
            FilesystemError: If the template is missing or creating or
                copying any part of the tree fails.
            InstallError: If the install command fails.
        """
        if not project_name:
            raise UsageError("Please provide a project name.")

        started = time.monotonic()
        parent = Path(parent_dir) if parent_dir is not None else Path.cwd()
        project_root = parent / project_name

        try:
            taken = project_root.exists() or project_root.is_symlink()
        except OSError as exc:
            # e.g. a name longer than the filesystem allows, or an unsearchable parent
            raise FilesystemError(
                f"Could not check {project_root}: {exc}", path=project_root
            ) from exc
        if taken:
            raise ConflictError(project_root)

        template_dir = Path(self.config.template_dir)
        if not template_dir.is_dir():
            raise FilesystemError(
                f"Template directory not found: {template_dir}", path=template_dir
            )

        print_info(
            f"Creating project [bold]{escape(project_name)}[/bold] in {escape(str(parent))}..."
        )
        try:
            project_root.mkdir()
        except OSError as exc:
            raise FilesystemError(
                f"Could not create {project_root}: {exc}", path=project_root
            ) from exc

        print_info("Copying template files...")
        try:
            files = copy_tree(template_dir, project_root)
        except OSError as exc:
            failed = Path(exc.filename) if exc.filename else project_root
            raise FilesystemError(
                f"Failed to copy template into {project_root}: {exc}", path=failed
            ) from exc

        print_info("Installing dependencies...")
        await self.installer.install(project_root)

        return ScaffoldResult(
            project_root=project_root,
            files=files,
            install_command=self.installer.command,
            duration=time.monotonic() - started,
        )
