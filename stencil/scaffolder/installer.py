"""Dependency installation for a freshly scaffolded project."""

from __future__ import annotations

import shlex
import shutil
from pathlib import Path

from stencil.errors import InstallError
from stencil.utils import run_command


class DependencyInstaller:
    """Runs the package manager's install command inside a project.

    The child process inherits the caller's standard streams, so its output
    appears directly on the terminal. There is no timeout.
    """

    def __init__(self, argv: list[str]) -> None:
        if not argv:
            raise ValueError("argv must contain at least the program name")
        self.argv = list(argv)

    @property
    def command(self) -> str:
        """The install command as a printable string."""
        return shlex.join(self.argv)

    def _resolved_argv(self) -> list[str]:
        # shutil.which finds wrappers such as npm.cmd on Windows.
        program = shutil.which(self.argv[0]) or self.argv[0]
        return [program, *self.argv[1:]]

    async def install(self, project_root: str | Path) -> None:
        """Run the install command with *project_root* as working directory.

        Raises:
            InstallError: If the command cannot be started or exits non-zero.
        """
        try:
            returncode, _, _ = await run_command(
                self._resolved_argv(),
                cwd=project_root,
                capture=False,
            )
        except OSError as exc:
            raise InstallError(
                f"Could not run '{self.command}': {exc}",
                command=self.command,
            ) from exc

        if returncode != 0:
            raise InstallError(
                f"'{self.command}' failed with exit code {returncode}",
                command=self.command,
                returncode=returncode,
            )
